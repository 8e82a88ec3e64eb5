#!/usr/bin/env python3
"""Serve the API with uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from hive.config import Settings
from hive.util.logging import log_level, setup_logging
from hive.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting Hive API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "hive.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_config=None,  # Keep the handlers installed by setup_logging
            log_level=log_level(settings),
        )
    except Exception as e:
        logfire.error(
            "Hive API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container exits non-zero
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
