"""PostgreSQL implementation of Task repository."""

from typing import Dict, List, Optional

from sqlalchemy import delete, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

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
from hive.persistence.mappers import row_to_task, task_to_dict
from hive.persistence.tables import tasks_table

_SORT_COLUMNS = {
    TaskSortField.CREATED_AT: tasks_table.c.created_at,
    TaskSortField.UPDATED_AT: tasks_table.c.updated_at,
    TaskSortField.TITLE: tasks_table.c.title,
    TaskSortField.STATUS: tasks_table.c.status,
}


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresTaskRepository(TaskRepository):
    """PostgreSQL implementation of TaskRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID."""
        stmt = select(tasks_table).where(tasks_table.c.id == task_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_task(dict(row)) if row else None

    async def find_many(
        self,
        project_ids: List[ProjectId],
        status: Optional[TaskStatus] = None,
        assigned_to: Optional[UserId] = None,
        search: Optional[str] = None,
        sort_field: TaskSortField = TaskSortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
    ) -> List[Task]:
        """Find tasks within projects with optional filters.

        Search uses ILIKE on title and description with wildcards escaped.
        """
        if not project_ids:
            return []

        stmt = select(tasks_table).where(tasks_table.c.project_id.in_(project_ids))
        if status:
            stmt = stmt.where(tasks_table.c.status == status.value)
        if assigned_to:
            stmt = stmt.where(tasks_table.c.assigned_to == assigned_to)
        if search:
            pattern = f"%{_escape_like(search)}%"
            stmt = stmt.where(
                or_(
                    tasks_table.c.title.ilike(pattern, escape="\\"),
                    tasks_table.c.description.ilike(pattern, escape="\\"),
                )
            )

        column = _SORT_COLUMNS[sort_field]
        stmt = stmt.order_by(
            column.asc() if order == SortOrder.ASC else column.desc(),
            tasks_table.c.id,
        )

        result = await self.session.execute(stmt)
        return [row_to_task(dict(row)) for row in result.mappings().all()]

    async def count_by_status(
        self,
        project_ids: List[ProjectId],
        assigned_to: Optional[UserId] = None,
    ) -> Dict[TaskStatus, int]:
        """Count tasks per status."""
        if not project_ids:
            return {}

        stmt = (
            select(tasks_table.c.status, func.count())
            .where(tasks_table.c.project_id.in_(project_ids))
            .group_by(tasks_table.c.status)
        )
        if assigned_to:
            stmt = stmt.where(tasks_table.c.assigned_to == assigned_to)

        result = await self.session.execute(stmt)
        return {TaskStatus(status): count for status, count in result.all()}

    async def save(self, task: Task) -> Task:
        """Save a task (create or update)."""
        task_dict = task_to_dict(task)
        existing = await self.find_by_id(task.id)

        if existing:
            stmt = (
                update(tasks_table)
                .where(tasks_table.c.id == task.id)
                .values(**task_dict)
            )
        else:
            stmt = insert(tasks_table).values(**task_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return task

    async def delete(self, task_id: TaskId) -> None:
        """Delete a task."""
        await self.session.execute(
            delete(tasks_table).where(tasks_table.c.id == task_id)
        )

    async def delete_by_project(self, project_id: ProjectId) -> int:
        """Delete all tasks of a project."""
        result = await self.session.execute(
            delete(tasks_table).where(tasks_table.c.project_id == project_id)
        )
        return result.rowcount or 0
