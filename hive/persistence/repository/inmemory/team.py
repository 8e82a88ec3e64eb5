"""In-memory team repository for testing."""

from typing import Optional

from hive.domain.model import Team
from hive.domain.repository import TeamRepository
from hive.domain.value import TeamId, UserId

from .store import InMemoryStore


class InMemoryTeamRepository(TeamRepository):
    """In-memory implementation of TeamRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, team_id: TeamId) -> Optional[Team]:
        """Find a team by ID."""
        return self._store.teams.get(team_id)

    async def find_default(self) -> Optional[Team]:
        """Find the default team."""
        for team in self._store.teams.values():
            if team.is_default:
                return team
        return None

    async def create_default(self, team: Team) -> Team:
        """Create the default team unless one already exists."""
        existing = await self.find_default()
        if existing:
            return existing
        members = list(dict.fromkeys(team.member_ids))
        created = team.model_copy(update={"is_default": True, "member_ids": members})
        self._store.teams[created.id] = created
        return created

    async def add_member(self, team_id: TeamId, user_id: UserId) -> bool:
        """Add a member if not already present."""
        team = self._store.teams.get(team_id)
        if team is None or user_id in team.member_ids:
            return False
        self._store.teams[team_id] = team.model_copy(
            update={"member_ids": [*team.member_ids, user_id]}
        )
        return True

    async def remove_member(self, team_id: TeamId, user_id: UserId) -> None:
        """Remove a member if present."""
        team = self._store.teams.get(team_id)
        if team is None:
            return
        self._store.teams[team_id] = team.model_copy(
            update={"member_ids": [m for m in team.member_ids if m != user_id]}
        )

    async def save(self, team: Team) -> Team:
        """Save a team, keeping the stored member list on update."""
        existing = self._store.teams.get(team.id)
        if existing:
            team = team.model_copy(update={"member_ids": existing.member_ids})
        self._store.teams[team.id] = team
        return team
