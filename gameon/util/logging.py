"""Stdlib logging setup for GameOn and the libraries under it."""

import logging
import sys

from gameon.config import Settings

# Library loggers and the level they run at regardless of environment
LIBRARY_LEVELS = {
    "sqlalchemy.engine": logging.WARNING,
    "asyncpg": logging.WARNING,
    "alembic": logging.INFO,
}


def log_level(settings: Settings) -> int:
    """DEBUG when debugging, WARNING in production, INFO otherwise."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger and quiet noisy libraries.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name, library_level in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(library_level)
    logging.getLogger("gameon").setLevel(level)

    get_logger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``gameon`` hierarchy (pass ``__name__``)."""
    return logging.getLogger(name)
