"""Task repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from hive.domain.model.task import Task
from hive.domain.value import (
    ProjectId,
    SortOrder,
    TaskId,
    TaskSortField,
    TaskStatus,
    UserId,
)


class TaskRepository(ABC):
    """Repository for Task entity.

    Tasks carry no team id. Callers scope queries by passing the project ids
    of the caller's team.
    """

    @abstractmethod
    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID.

        Args:
            task_id: The task's unique identifier

        Returns:
            The task if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_many(
        self,
        project_ids: List[ProjectId],
        status: Optional[TaskStatus] = None,
        assigned_to: Optional[UserId] = None,
        search: Optional[str] = None,
        sort_field: TaskSortField = TaskSortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
    ) -> List[Task]:
        """Find tasks within a set of projects.

        Args:
            project_ids: Projects to search in (empty list matches nothing)
            status: Optional status filter
            assigned_to: Optional assignee filter
            search: Optional case-insensitive substring of title or description
            sort_field: Column to sort by
            order: Sort direction

        Returns:
            Matching tasks in the requested order
        """
        pass

    @abstractmethod
    async def count_by_status(
        self,
        project_ids: List[ProjectId],
        assigned_to: Optional[UserId] = None,
    ) -> Dict[TaskStatus, int]:
        """Count tasks per status within a set of projects.

        Returns:
            Mapping of status to count; statuses with no tasks may be absent
        """
        pass

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """Save a task (create or update)."""
        pass

    @abstractmethod
    async def delete(self, task_id: TaskId) -> None:
        """Delete a task (hard delete)."""
        pass

    @abstractmethod
    async def delete_by_project(self, project_id: ProjectId) -> int:
        """Delete every task of a project.

        Returns:
            Number of deleted tasks
        """
        pass
