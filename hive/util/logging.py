"""Standard-library logging setup.

Hive's own events go through Logfire. Libraries underneath it (uvicorn,
SQLAlchemy, alembic, asyncpg) log through `logging`; their records are
forwarded to Logfire so every event ends up in one place.
"""

import logging

import logfire

from hive.config import Settings

# Chatty at INFO and not useful for operating the API
_QUIET_LOGGERS = ("httpx", "httpcore", "websockets", "asyncio")


def log_level(settings: Settings) -> int:
    """Root log level for the environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.is_production:
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route standard-library log records into Logfire.

    Call after `configure_logfire`.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
