"""In-memory task repository for testing."""

from typing import Dict, List, Optional

from hive.domain.model import Task
from hive.domain.repository import TaskRepository
from hive.domain.value import (
    ProjectId,
    SortOrder,
    TaskId,
    TaskSortField,
    TaskStatus,
    UserId,
)

from .store import InMemoryStore

_SORT_KEYS = {
    TaskSortField.CREATED_AT: lambda t: t.created_at,
    TaskSortField.UPDATED_AT: lambda t: t.updated_at,
    TaskSortField.TITLE: lambda t: t.title,
    TaskSortField.STATUS: lambda t: t.status.value,
}


class InMemoryTaskRepository(TaskRepository):
    """In-memory implementation of TaskRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID."""
        return self._store.tasks.get(task_id)

    async def find_many(
        self,
        project_ids: List[ProjectId],
        status: Optional[TaskStatus] = None,
        assigned_to: Optional[UserId] = None,
        search: Optional[str] = None,
        sort_field: TaskSortField = TaskSortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
    ) -> List[Task]:
        """Find tasks within projects with optional filters."""
        wanted = set(project_ids)
        needle = search.lower() if search else None
        matches = []
        for task in self._store.tasks.values():
            if task.project_id not in wanted:
                continue
            if status and task.status != status:
                continue
            if assigned_to and task.assigned_to != assigned_to:
                continue
            if needle and not (
                needle in task.title.lower() or needle in task.description.lower()
            ):
                continue
            matches.append(task)

        matches.sort(key=_SORT_KEYS[sort_field], reverse=order == SortOrder.DESC)
        return matches

    async def count_by_status(
        self,
        project_ids: List[ProjectId],
        assigned_to: Optional[UserId] = None,
    ) -> Dict[TaskStatus, int]:
        """Count tasks per status."""
        counts: Dict[TaskStatus, int] = {}
        for task in await self.find_many(project_ids, assigned_to=assigned_to):
            counts[task.status] = counts.get(task.status, 0) + 1
        return counts

    async def save(self, task: Task) -> Task:
        """Save a task."""
        self._store.tasks[task.id] = task
        return task

    async def delete(self, task_id: TaskId) -> None:
        """Delete a task."""
        self._store.tasks.pop(task_id, None)

    async def delete_by_project(self, project_id: ProjectId) -> int:
        """Delete all tasks of a project."""
        doomed = [t.id for t in self._store.tasks.values() if t.project_id == project_id]
        for task_id in doomed:
            del self._store.tasks[task_id]
        return len(doomed)
