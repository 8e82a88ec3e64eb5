"""PostgreSQL implementation of Activity repository."""

from typing import List

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from hive.domain.model import Activity
from hive.domain.repository import ActivityRepository
from hive.domain.value import TeamId, UserId
from hive.persistence.mappers import activity_to_dict, row_to_activity
from hive.persistence.tables import activities_table


class PostgresActivityRepository(ActivityRepository):
    """PostgreSQL implementation of ActivityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def append(self, activity: Activity) -> Activity:
        """Insert an activity inside a savepoint.

        A failed insert rolls back to the savepoint only, so the caller's
        transaction can still commit.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                insert(activities_table).values(**activity_to_dict(activity))
            )
        return activity

    async def find_by_team(self, team_id: TeamId, limit: int = 20) -> List[Activity]:
        """Find a team's latest activities."""
        stmt = (
            select(activities_table)
            .where(activities_table.c.team_id == team_id)
            .order_by(activities_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_activity(dict(row)) for row in result.mappings().all()]

    async def find_by_user(self, user_id: UserId, limit: int = 20) -> List[Activity]:
        """Find a user's latest activities."""
        stmt = (
            select(activities_table)
            .where(activities_table.c.actor_id == user_id)
            .order_by(activities_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_activity(dict(row)) for row in result.mappings().all()]
