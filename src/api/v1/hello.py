# src/api/v1/hello.py
# Greeting handlers for the v1 API
# Each handler builds its own User and returns a fixed plain-text body

from flask import Response

from model import User

# Name used by both greetings
DEFAULT_NAME = "World"

PLAIN_TEXT = "text/plain"


def hello_handler():
    """
    Say hello.

    Example:
        GET /v1/hello  ->  200 "Hello, World!"
    """
    user = User(name=DEFAULT_NAME)
    return Response("Hello, " + user.name + "!", mimetype=PLAIN_TEXT)


def goodbye_handler():
    """
    Say goodbye.

    Example:
        GET /v1/goodbye  ->  200 "Goodbye, World!"
    """
    user = User(name=DEFAULT_NAME)
    return Response("Goodbye, " + user.name + "!", mimetype=PLAIN_TEXT)
