#!/usr/bin/env python3
"""Upgrade the database schema before the API starts.

Usage:
    DATABASE__URL=postgresql+asyncpg://... python scripts/run_migrations.py [revision]
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from hive.config import Settings
from hive.util.logging import setup_logging
from hive.util.observability import configure_logfire

ROOT = Path(__file__).resolve().parent.parent


def _alembic_config() -> Config:
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "migrations"))
    # Logging is already routed to Logfire
    config.attributes["configure_logger"] = False
    return config


def main(revision: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(_alembic_config(), revision)
        except Exception as e:
            logfire.error(
                "Schema upgrade failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the deploy stops instead of serving a stale schema
            raise
    logfire.info("Schema is up to date", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
