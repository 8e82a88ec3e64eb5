"""Project entity."""

from datetime import datetime

from pydantic import Field

from hive.domain.model.common import DomainModel, utc_now
from hive.domain.value import ProjectId, ProjectStatus, TeamId, UserId


class Project(DomainModel):
    """Project entity.

    Created and edited by ADMIN/MANAGER, deleted by ADMIN only.
    Always scoped to the creator's team.
    """

    id: ProjectId
    name: str = Field(min_length=3, max_length=100)
    description: str = Field(default="", max_length=500)
    status: ProjectStatus = ProjectStatus.ACTIVE
    team_id: TeamId
    created_by: UserId
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
