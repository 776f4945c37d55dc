# src/logger/logging.py
# Logging setup shared by every module of the greeting service
# Note: the folder is called 'logger' so it does not shadow the stdlib 'logging' module

import logging
import sys
from typing import Optional

# timestamp - logger name - level - message
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None):
    """
    Send all log records to stdout at the requested level.

    Args:
        level: Level name such as "DEBUG" or "WARNING"; falls back to
               settings.app.log_level, and unknown names map to INFO
    """
    try:
        from config import settings
        log_level = level or settings.app.log_level
    except ImportError:
        log_level = level or "INFO"

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # force=True drops the handler installed by an earlier call
    logging.basicConfig(
        level=numeric_level,
        handlers=[handler],
        force=True,
    )


def get_logger(name: Optional[str] = None):
    """Return the logger for a module (pass __name__), or the root logger."""
    return logging.getLogger(name)


# Configured once on first import
setup_logging()
