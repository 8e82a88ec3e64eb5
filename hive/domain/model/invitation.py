"""Invitation entity.

Invitations grant membership of a team at a given role. They are single-use
and expire a fixed time after creation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hive.domain.model.common import DomainModel, utc_now
from hive.domain.value import (
    InvitationCode,
    InvitationId,
    InvitationState,
    Role,
    TeamId,
    UserId,
)


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - Consumed at most once; the first valid use sets `used` and `used_by`
    - Expiry is a clock comparison at read time, nothing sweeps old codes
    - Used or expired invitations are permanently inert
    """

    id: InvitationId
    code: InvitationCode
    team_id: TeamId
    created_by: UserId
    email: Optional[str] = None  # Restricts use to this address when set
    role: Role = Role.MEMBER
    used: bool = False
    used_by: Optional[UserId] = None
    expires_at: datetime
    created_at: datetime = Field(default_factory=utc_now)

    def state(self, now: datetime) -> InvitationState:
        """Derive the invitation state at the given instant."""
        if self.used:
            return InvitationState.USED
        if self.expires_at <= now:
            return InvitationState.EXPIRED
        return InvitationState.ACTIVE

    def is_for_email(self, email: str) -> bool:
        """Whether a consumer with this email may use the invitation."""
        if not self.email:
            return True
        return self.email.strip().lower() == email.strip().lower()
