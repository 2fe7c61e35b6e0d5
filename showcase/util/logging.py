"""Logging configuration for the application.

Structured events and spans go through logfire; this module sets up the
plain stdlib loggers used by the interface layer and third-party libraries.
"""

import logging
import sys

from showcase.config import Settings

_NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Configure root and application loggers.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "test":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Replace handlers installed by imported libraries
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("showcase").setLevel(level)

    get_logger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically for `__name__`)."""
    return logging.getLogger(name)
