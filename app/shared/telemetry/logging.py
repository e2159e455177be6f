"""Logging configuration for the people directory service."""

import logging
import sys

from app.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that log each outbound request at INFO.
_HTTP_CLIENT_LOGGERS = ("httpx", "httpcore")


def _resolve_level(log_level: str | None, debug: bool) -> int:
    """LOG_LEVEL wins when it names a level; otherwise DEBUG in debug mode, else INFO."""
    if log_level:
        level = logging.getLevelName(log_level.upper())
        if isinstance(level, int):
            return level
    return logging.DEBUG if debug else logging.INFO


def setup_logging() -> None:
    """Configure root logging to stdout from settings.

    httpx/httpcore stay at WARNING unless the service itself logs at DEBUG.
    """
    settings = get_settings()
    level = _resolve_level(settings.log_level, settings.debug)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    client_level = level if level <= logging.DEBUG else logging.WARNING
    for name in _HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.
    """
    return logging.getLogger(name)
