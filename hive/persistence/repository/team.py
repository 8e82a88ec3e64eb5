"""PostgreSQL implementation of Team repository."""

from typing import Any, Dict, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hive.domain.model import Team
from hive.domain.repository import TeamRepository
from hive.domain.value import TeamId, UserId
from hive.persistence.mappers import row_to_team, team_to_dict
from hive.persistence.tables import team_members_table, teams_table


class PostgresTeamRepository(TeamRepository):
    """PostgreSQL implementation of TeamRepository.

    Membership lives in `team_members`, ordered by join time. Inserts use
    `ON CONFLICT DO NOTHING` so adding a member is a set union.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, team_id: TeamId) -> Optional[Team]:
        """Find a team by ID with its members."""
        stmt = select(teams_table).where(teams_table.c.id == team_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return await self._to_team(dict(row)) if row else None

    async def find_default(self) -> Optional[Team]:
        """Find the default team."""
        stmt = select(teams_table).where(teams_table.c.is_default.is_(True))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return await self._to_team(dict(row)) if row else None

    async def create_default(self, team: Team) -> Team:
        """Create the default team unless another request already did.

        The partial unique index on `is_default` rejects a second default
        team; the loser of a race re-reads and returns the winner.
        """
        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(teams_table).values(**team_to_dict(team))
                )
                for user_id in team.member_ids:
                    await self.session.execute(
                        pg_insert(team_members_table)
                        .values(team_id=team.id, user_id=user_id)
                        .on_conflict_do_nothing(
                            index_elements=["team_id", "user_id"]
                        )
                    )
        except IntegrityError:
            existing = await self.find_default()
            if existing is None:
                raise
            return existing

        await self.session.flush()
        created = await self.find_by_id(team.id)
        return created or team

    async def add_member(self, team_id: TeamId, user_id: UserId) -> bool:
        """Add a member if not already present."""
        stmt = (
            pg_insert(team_members_table)
            .values(team_id=team_id, user_id=user_id)
            .on_conflict_do_nothing(index_elements=["team_id", "user_id"])
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def remove_member(self, team_id: TeamId, user_id: UserId) -> None:
        """Remove a member if present."""
        stmt = delete(team_members_table).where(
            team_members_table.c.team_id == team_id,
            team_members_table.c.user_id == user_id,
        )
        await self.session.execute(stmt)

    async def save(self, team: Team) -> Team:
        """Save a team (create or update).

        Members of a new team are inserted; on update only the team's own
        columns change.
        """
        team_dict = team_to_dict(team)
        existing = await self.find_by_id(team.id)

        if existing:
            stmt = (
                update(teams_table)
                .where(teams_table.c.id == team.id)
                .values(**team_dict)
            )
            await self.session.execute(stmt)
        else:
            await self.session.execute(insert(teams_table).values(**team_dict))
            for user_id in team.member_ids:
                await self.add_member(team.id, user_id)

        await self.session.flush()
        return team

    async def _to_team(self, row: Dict[str, Any]) -> Team:
        stmt = (
            select(team_members_table.c.user_id)
            .where(team_members_table.c.team_id == row["id"])
            .order_by(team_members_table.c.joined_at)
        )
        result = await self.session.execute(stmt)
        return row_to_team(row, list(result.scalars().all()))
