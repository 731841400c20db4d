"""Standard library logging for third-party packages.

The service itself logs through logfire. uvicorn, SQLAlchemy and asyncpg use
the ``logging`` module; their records are forwarded to logfire so they end up
next to the request spans.
"""

import logging

import logfire

from inkwell.config import Settings

# Loggers that are noisy at INFO and only interesting when something breaks
QUIET_LOGGERS = ("sqlalchemy.pool", "asyncpg", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into logfire. Call after ``configure_logfire``."""
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
