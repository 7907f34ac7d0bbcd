"""
Logging setup for the Attendance Portal client.

Modules obtain their logger with get_logger(__name__); the root handler is
configured once from settings on first use.
"""

import logging
import sys

from attendance_portal.core.config import settings

_configured = False


def setup_logging() -> None:
    """Configure the package logger from settings (idempotent)."""
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))

    package_logger = logging.getLogger("attendance_portal")
    package_logger.setLevel(settings.LOG_LEVEL.upper())
    package_logger.addHandler(handler)
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    setup_logging()
    return logging.getLogger(name)
