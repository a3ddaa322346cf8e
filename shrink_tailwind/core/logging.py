"""
Logging setup for the shrink_tailwind package.

Modules log through ``logging.getLogger(__name__)``; this module only
attaches a console handler to the package logger once.
"""

import logging
import sys
from typing import Optional

from .config import settings


LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``shrink_tailwind`` logger.

    Args:
        level: Log level name, defaults to settings.LOG_LEVEL

    Returns:
        The package logger
    """
    logger = logging.getLogger("shrink_tailwind")
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
