# src/api/v1/__init__.py
# Version 1 of the HTTP API
# The route table is a static list of (method, path, handler) triples,
# bound to a blueprint that the application factory mounts under /v1

from flask import Blueprint

from .hello import hello_handler, goodbye_handler

# Route table - fixed at import time, not configurable at runtime
ROUTES = [
    ("GET", "/hello", hello_handler),
    ("GET", "/goodbye", goodbye_handler),
]


def create_blueprint() -> Blueprint:
    """
    Build the v1 blueprint with every route in ROUTES registered.

    A new blueprint is returned on each call so several apps (tests) can
    each mount their own copy.

    Returns:
        Blueprint mounted at /v1
    """
    blueprint = Blueprint("v1", __name__, url_prefix="/v1")
    for method, path, handler in ROUTES:
        # Only the listed method (plus HEAD for GET) is served; OPTIONS gets a 405
        blueprint.add_url_rule(
            path,
            view_func=handler,
            methods=[method],
            provide_automatic_options=False,
        )
    return blueprint


__all__ = [
    "ROUTES",
    "create_blueprint",
    "hello_handler",
    "goodbye_handler",
]
