"""Team aggregate root.

The team is the tenancy boundary: projects, tasks, messages, invitations and
activities all belong to exactly one team.
"""

from datetime import datetime

from pydantic import Field

from hive.domain.model.common import DomainModel, utc_now
from hive.domain.value import TeamId, UserId


class Team(DomainModel):
    """Team aggregate root.

    Business rules:
    - The team owns its member list; members are kept in join order
    - At most one team is flagged as the default team new users join
    """

    id: TeamId
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)
    admin_id: UserId
    member_ids: list[UserId] = Field(default_factory=list)
    is_default: bool = False
    created_at: datetime = Field(default_factory=utc_now)

    def has_member(self, user_id: UserId) -> bool:
        """Check membership."""
        return user_id in self.member_ids
