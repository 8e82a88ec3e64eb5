"""Unit tests for ActivityService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from hive.domain.model import Activity
from hive.domain.repository import ActivityRepository
from hive.domain.service import ActivityService
from hive.domain.value import ActivityId, ActivityType, TeamId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class BrokenActivityRepository(ActivityRepository):
    """Activity repository whose writes always fail."""

    async def append(self, activity):
        raise RuntimeError("database unavailable")

    async def find_by_team(self, team_id, limit=20):
        return []

    async def find_by_user(self, user_id, limit=20):
        return []


class TestRecord:
    """Tests for record."""

    @pytest.mark.asyncio
    async def test_record_appends_activity(self, unit_env):
        """A recorded activity can be read back for the team."""
        activity_service = await unit_env.get(ActivityService)
        team_id, actor_id = TeamId(uuid4()), UserId(uuid4())

        activity = await activity_service.record(
            type=ActivityType.MESSAGE_SENT,
            description="Alice sent a message",
            actor_id=actor_id,
            team_id=team_id,
        )

        assert activity is not None
        assert activity.metadata == {}
        assert await activity_service.for_team(team_id) == [activity]
        assert await activity_service.for_user(actor_id) == [activity]

    @pytest.mark.asyncio
    async def test_record_failure_is_swallowed(self):
        """A failing write returns None instead of raising."""
        activity_service = ActivityService(BrokenActivityRepository())

        result = await activity_service.record(
            type=ActivityType.TASK_CREATED,
            description="Alice created task",
            actor_id=UserId(uuid4()),
            team_id=TeamId(uuid4()),
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_long_descriptions_are_truncated(self, unit_env):
        """Descriptions are capped at 500 characters."""
        activity_service = await unit_env.get(ActivityService)

        activity = await activity_service.record(
            type=ActivityType.PROJECT_CREATED,
            description="x" * 600,
            actor_id=UserId(uuid4()),
            team_id=TeamId(uuid4()),
        )

        assert len(activity.description) == 500


class TestQueries:
    """Tests for for_team and for_user."""

    @pytest.mark.asyncio
    async def test_for_team_returns_newest_first_up_to_limit(self, unit_env):
        """The latest activities come first and the limit is honored."""
        activity_service = await unit_env.get(ActivityService)
        activity_repo = await unit_env.get(ActivityRepository)
        team_id, actor_id = TeamId(uuid4()), UserId(uuid4())
        start = datetime(2024, 5, 1, tzinfo=timezone.utc)
        for i in range(5):
            await activity_repo.append(
                Activity(
                    id=ActivityId(uuid4()),
                    type=ActivityType.TASK_UPDATED,
                    description=f"update {i}",
                    actor_id=actor_id,
                    team_id=team_id,
                    created_at=start + timedelta(minutes=i),
                )
            )

        activities = await activity_service.for_team(team_id, limit=3)

        assert [a.description for a in activities] == [
            "update 4",
            "update 3",
            "update 2",
        ]
