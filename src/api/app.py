# src/api/app.py
# This file creates the Flask application and the HTTP server that runs it
# Routes come from the versioned blueprints (api/v1); anything they don't
# match falls through to Flask's default 404 / 405 responses

from typing import Optional

from flask import Flask, request
from werkzeug.exceptions import HTTPException
from werkzeug.serving import make_server

from logger import get_logger
from config import settings

from .v1 import create_blueprint

logger = get_logger(__name__)


def create_app():
    """
    Create and configure the Flask application.

    Factory pattern lets tests build as many independent apps as they need.

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)

    app.config['DEBUG'] = settings.app.debug

    # Register API routes
    register_routes(app)

    # Log every request and every rejected one
    register_request_logging(app)
    register_error_handlers(app)

    logger.info(f"Flask application created: debug={settings.app.debug}")

    return app


def register_routes(app: Flask):
    """
    Register all API routes with the Flask application.

    Args:
        app: Flask application instance
    """
    app.register_blueprint(create_blueprint())

    for rule in app.url_map.iter_rules():
        if rule.endpoint != 'static':
            methods = ",".join(sorted(rule.methods - {"HEAD", "OPTIONS"}))
            logger.debug(f"Registered route: {methods} {rule.rule} -> {rule.endpoint}")


def register_request_logging(app: Flask):
    """
    Log method, path and status of each handled request at DEBUG level.

    Args:
        app: Flask application instance
    """

    @app.after_request
    def log_request(response):
        logger.debug(f"{request.method} {request.path} -> {response.status_code}")
        return response


def register_error_handlers(app: Flask):
    """
    Register error handlers for the Flask application.

    Unmatched paths and methods keep Flask's default responses; the handler
    only records them before handing the exception back.

    Args:
        app: Flask application instance
    """

    @app.errorhandler(HTTPException)
    def log_http_error(error):
        logger.warning(f"{request.method} {request.path} rejected: {error.code} {error.name}")
        # Returning the exception lets Werkzeug render its default response
        return error


def create_server(app: Flask, host: Optional[str] = None, port: Optional[int] = None):
    """
    Bind a threaded WSGI server for the application.

    The socket is bound here, before serving starts, so an address that is
    already in use fails immediately.

    Args:
        app: Flask application to serve
        host: Interface to listen on (defaults to settings.app.api_host)
        port: Port to listen on (defaults to settings.app.api_port)

    Returns:
        A bound server; call serve_forever() to start accepting requests

    Raises:
        SystemExit: If the address cannot be bound (port in use, permission
            denied); Werkzeug prints the cause to stderr and exits with code 1
    """
    host = host if host is not None else settings.app.api_host
    port = port if port is not None else settings.app.api_port

    server = make_server(host, port, app, threaded=True)
    logger.info(f"Bound HTTP server on {host}:{server.server_port}")
    return server
