"""User aggregate root.

Users authenticate through the external identity provider and belong to at
most one team. `team_id` mirrors the team's member list.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hive.domain.model.common import DomainModel, utc_now
from hive.domain.value import Role, TeamId, UserId


class User(DomainModel):
    """User aggregate root.

    A user without `team_id` is unassigned and gets repaired on its next
    authenticated request.
    """

    id: UserId
    external_id: str = Field(min_length=1, max_length=255)  # Identity provider subject
    email: str = Field(min_length=3, max_length=255)
    name: str = Field(min_length=1, max_length=100)
    role: Role = Role.MEMBER
    team_id: Optional[TeamId] = None
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def is_assigned(self) -> bool:
        """Whether the user belongs to a team."""
        return self.team_id is not None
