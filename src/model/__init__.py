# src/model/__init__.py
# This file makes the model folder a Python package

from .user import User

__all__ = [
    "User",
]
