"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from hive.domain.model.invitation import Invitation
from hive.domain.value import InvitationCode, InvitationId, TeamId, UserId


class InvitationRepository(ABC):
    """Repository for Invitation entity."""

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        pass

    @abstractmethod
    async def find_in_team(
        self, invitation_id: InvitationId, team_id: TeamId
    ) -> Optional[Invitation]:
        """Find an invitation only if it belongs to the given team."""
        pass

    @abstractmethod
    async def find_active_by_code(
        self, code: InvitationCode, now: datetime
    ) -> Optional[Invitation]:
        """Find an unused, unexpired invitation by code.

        Args:
            code: Invitation code
            now: Instant used for the expiry comparison

        Returns:
            The invitation if it is active, None otherwise
        """
        pass

    @abstractmethod
    async def mark_used(
        self, code: InvitationCode, user_id: UserId, now: datetime
    ) -> Optional[Invitation]:
        """Atomically consume an active invitation.

        The transition is a single conditional write guarded by
        `used = false AND expires_at > now`. Of two concurrent callers,
        exactly one gets the invitation back.

        Args:
            code: Invitation code
            user_id: Consuming user
            now: Instant used for the expiry comparison

        Returns:
            The updated invitation, or None if it was not active
        """
        pass

    @abstractmethod
    async def find_unexpired_by_team(
        self, team_id: TeamId, now: datetime
    ) -> List[Invitation]:
        """Find a team's invitations that have not expired, newest first.

        Used invitations are included.
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update)."""
        pass

    @abstractmethod
    async def delete(self, invitation_id: InvitationId) -> None:
        """Delete an invitation (hard delete)."""
        pass
