# src/main.py
# This is the entry point of the application - the file that gets executed
# It:
# 1. Creates the Flask API application
# 2. Binds the HTTP server (fatal if the port is taken)
# 3. Serves requests until the process is stopped

from logger import get_logger
from config import settings

from api import create_app, create_server

logger = get_logger(__name__)


def main():
    """
    Start the greeting service and block until it stops.

    A bind failure terminates the process; there is no retry.
    Ctrl+C returns normally after the socket is closed.
    """
    logger.info("=" * 60)
    logger.info("Starting Greeting Service")
    logger.info(f"Environment: {settings.app.environment}")
    logger.info(f"Debug mode: {settings.app.debug}")
    logger.info("=" * 60)

    app = create_app()

    try:
        server = create_server(app, settings.app.api_host, settings.app.api_port)
    except SystemExit:
        logger.error(
            f"Could not bind {settings.app.api_host}:{settings.app.api_port}, shutting down"
        )
        raise

    logger.info(f"Hello endpoint: http://{settings.app.api_host}:{server.server_port}/v1/hello")
    logger.info(f"Goodbye endpoint: http://{settings.app.api_host}:{server.server_port}/v1/goodbye")

    # Blocks until Ctrl+C. Werkzeug's own loop swallows the interrupt and closes
    # its socket; the explicit close below covers any other server object
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Received shutdown signal (Ctrl+C)")
    finally:
        server.server_close()
        logger.info("Application shutdown complete")


# Only run main() if this file is executed directly, not when imported
if __name__ == "__main__":
    main()
