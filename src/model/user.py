# src/model/user.py
# Value objects used by the request handlers

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    A named user.

    Built fresh inside each handler call and thrown away with the response,
    so it is never shared between requests.
    """
    name: str
