"""Task entity.

Tasks do not store a team id. Team ownership is derived from the owning
project and re-checked on every task operation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hive.domain.model.common import DomainModel, utc_now
from hive.domain.value import ProjectId, TaskId, TaskStatus, UserId


class Task(DomainModel):
    """Task entity."""

    id: TaskId
    title: str = Field(min_length=3, max_length=200)
    description: str = Field(default="", max_length=1000)
    status: TaskStatus = TaskStatus.TODO
    project_id: ProjectId
    assigned_to: Optional[UserId] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def is_assigned_to(self, user_id: UserId) -> bool:
        """Whether the task is assigned to the given user."""
        return self.assigned_to is not None and self.assigned_to == user_id
