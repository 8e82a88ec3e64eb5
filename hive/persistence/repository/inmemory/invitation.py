"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import List, Optional

from hive.domain.model import Invitation
from hive.domain.repository import InvitationRepository
from hive.domain.value import InvitationCode, InvitationId, TeamId, UserId

from .store import InMemoryStore


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        return self._store.invitations.get(invitation_id)

    async def find_in_team(
        self, invitation_id: InvitationId, team_id: TeamId
    ) -> Optional[Invitation]:
        """Find an invitation of the given team."""
        invitation = self._store.invitations.get(invitation_id)
        if invitation and invitation.team_id == team_id:
            return invitation
        return None

    async def find_active_by_code(
        self, code: InvitationCode, now: datetime
    ) -> Optional[Invitation]:
        """Find an unused, unexpired invitation by code."""
        for invitation in self._store.invitations.values():
            if (
                invitation.code == code
                and not invitation.used
                and invitation.expires_at > now
            ):
                return invitation
        return None

    async def mark_used(
        self, code: InvitationCode, user_id: UserId, now: datetime
    ) -> Optional[Invitation]:
        """Consume an active invitation."""
        invitation = await self.find_active_by_code(code, now)
        if invitation is None:
            return None
        used = invitation.model_copy(update={"used": True, "used_by": user_id})
        self._store.invitations[used.id] = used
        return used

    async def find_unexpired_by_team(
        self, team_id: TeamId, now: datetime
    ) -> List[Invitation]:
        """Find a team's unexpired invitations, newest first."""
        matches = [
            i
            for i in self._store.invitations.values()
            if i.team_id == team_id and i.expires_at > now
        ]
        matches.sort(key=lambda i: i.created_at, reverse=True)
        return matches

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation."""
        self._store.invitations[invitation.id] = invitation
        return invitation

    async def delete(self, invitation_id: InvitationId) -> None:
        """Delete an invitation."""
        self._store.invitations.pop(invitation_id, None)
