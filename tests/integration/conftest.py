"""Integration test configuration.

Integration tests run against a migrated PostgreSQL database (see
`scripts/run_migrations.py`). They are skipped unless `DATABASE__URL` is set.
"""

import os
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

_INTEGRATION_DIR = Path(__file__).parent


def pytest_collection_modifyitems(config, items):
    if os.environ.get("DATABASE__URL"):
        return
    skip = pytest.mark.skip(reason="DATABASE__URL not set; PostgreSQL required")
    for item in items:
        if _INTEGRATION_DIR in item.path.parents:
            item.add_marker(skip)


async def truncate_all(container) -> None:
    """Empty every table so each test starts from a clean database."""
    session = await container.get(AsyncSession)
    await session.execute(
        text(
            "TRUNCATE TABLE activities, invitations, messages, tasks, projects, "
            "team_members, teams, users CASCADE"
        )
    )
    await session.commit()


@pytest_asyncio.fixture
async def clean_database(integration_env):
    """Clean database before each test."""
    await truncate_all(integration_env)
    yield
