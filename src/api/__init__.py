# src/api/__init__.py
# This file makes the api folder a Python package
# It exports the Flask application factory and the server builder

from .app import create_app, create_server

__all__ = [
    "create_app",
    "create_server",
]
