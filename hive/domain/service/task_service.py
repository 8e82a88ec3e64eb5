"""Task domain service.

Tasks have no stored team id: every operation resolves the owning project
within the caller's team and treats tasks of other teams as missing.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import logfire

from hive.domain.error import NotFoundError, ValidationError
from hive.domain.model import Project, Task, User
from hive.domain.repository import ProjectRepository, TaskRepository, UserRepository
from hive.domain.value import (
    ActivityType,
    EntityType,
    ProjectId,
    Role,
    SortOrder,
    TaskId,
    TaskSortField,
    TaskStatus,
    TeamId,
    UserId,
)

from .access import check_task_update
from .activity_service import ActivityService
from .base import Service

UPDATABLE_FIELDS = frozenset({"title", "description", "status", "assigned_to"})
NULLABLE_FIELDS = frozenset({"assigned_to"})
TEXT_FIELDS = frozenset({"title", "description"})


@dataclass
class TaskStats:
    """Task counts per status."""

    total: int
    todo: int
    in_progress: int
    done: int


class TaskService(Service):
    """Domain service for task operations."""

    def __init__(
        self,
        task_repository: TaskRepository,
        project_repository: ProjectRepository,
        user_repository: UserRepository,
        activity_service: ActivityService,
    ) -> None:
        """Initialize task service.

        Args:
            task_repository: Task repository
            project_repository: Project repository (team ownership checks)
            user_repository: User repository (assignee checks)
            activity_service: Activity audit service
        """
        self.task_repository = task_repository
        self.project_repository = project_repository
        self.user_repository = user_repository
        self.activity_service = activity_service

    async def list_tasks(
        self,
        caller: User,
        project_id: ProjectId | None = None,
        status: TaskStatus | None = None,
        assigned_to: UserId | None = None,
        search: str | None = None,
        sort_field: TaskSortField = TaskSortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
    ) -> list[Task]:
        """List tasks visible to the caller.

        MEMBER callers only ever see tasks assigned to them, whatever
        `assigned_to` filter they pass.

        Args:
            caller: Authenticated user
            project_id: Optional project filter (must be in the caller's team)
            status: Optional status filter
            assigned_to: Optional assignee filter
            search: Optional case-insensitive text filter on title/description
            sort_field: Sort column
            order: Sort direction

        Returns:
            Matching tasks

        Raises:
            NotFoundError: If `project_id` is not a project of the caller's team
        """
        with logfire.span(
            "task_service.list_tasks",
            caller_id=str(caller.id),
            project_id=str(project_id) if project_id else None,
            status=status.value if status else None,
        ):
            project_ids = await self._visible_project_ids(caller, project_id)
            if caller.role == Role.MEMBER:
                assigned_to = caller.id

            tasks = await self.task_repository.find_many(
                project_ids,
                status=status,
                assigned_to=assigned_to,
                search=search.strip() if search and search.strip() else None,
                sort_field=sort_field,
                order=order,
            )
            logfire.info("Tasks listed", caller_id=str(caller.id), count=len(tasks))
            return tasks

    async def get_stats(self, caller: User) -> TaskStats:
        """Count the caller-visible tasks per status."""
        with logfire.span("task_service.get_stats", caller_id=str(caller.id)):
            project_ids = await self._visible_project_ids(caller)
            assigned_to = caller.id if caller.role == Role.MEMBER else None
            counts = await self.task_repository.count_by_status(
                project_ids, assigned_to=assigned_to
            )
            stats = TaskStats(
                total=sum(counts.values()),
                todo=counts.get(TaskStatus.TODO, 0),
                in_progress=counts.get(TaskStatus.IN_PROGRESS, 0),
                done=counts.get(TaskStatus.DONE, 0),
            )
            logfire.info("Task stats computed", caller_id=str(caller.id), total=stats.total)
            return stats

    async def get_task(self, caller: User, task_id: TaskId) -> tuple[Task, Project]:
        """Get a task of the caller's team together with its project.

        Raises:
            NotFoundError: If the task does not exist or belongs to another team
        """
        with logfire.span(
            "task_service.get_task", caller_id=str(caller.id), task_id=str(task_id)
        ):
            task = await self.task_repository.find_by_id(task_id)
            project = None
            if task and caller.team_id is not None:
                project = await self.project_repository.find_in_team(
                    task.project_id, caller.team_id
                )
            if not task or not project:
                logfire.warn("Task not found", task_id=str(task_id))
                raise NotFoundError("Task", str(task_id))
            return task, project

    async def create_task(
        self,
        actor: User,
        project_id: ProjectId,
        title: str,
        description: str = "",
        status: TaskStatus = TaskStatus.TODO,
        assigned_to: UserId | None = None,
    ) -> tuple[Task, Project]:
        """Create a task in a project of the actor's team.

        Returns:
            Tuple of (created task, its project)

        Raises:
            NotFoundError: If the project is not in the actor's team
            ValidationError: If the assignee is not a member of the team
        """
        with logfire.span(
            "task_service.create_task",
            actor_id=str(actor.id),
            project_id=str(project_id),
        ):
            project = await self._team_project(actor, project_id)
            if assigned_to is not None:
                await self._check_assignee(assigned_to, project.team_id)

            now = datetime.now(timezone.utc)
            task = Task(
                id=TaskId(uuid4()),
                title=title.strip(),
                description=description.strip(),
                status=status,
                project_id=project.id,
                assigned_to=assigned_to,
                created_at=now,
                updated_at=now,
            )
            saved = await self.task_repository.save(task)

            await self.activity_service.record(
                type=ActivityType.TASK_CREATED,
                description=f'{actor.name} created task "{saved.title}"',
                actor_id=actor.id,
                team_id=project.team_id,
                entity_id=saved.id,
                entity_type=EntityType.TASK,
                metadata={"projectName": project.name},
            )
            logfire.info("Task created", task_id=str(saved.id))
            return saved, project

    async def update_task(
        self, actor: User, task_id: TaskId, changes: dict[str, Any]
    ) -> tuple[Task, Project]:
        """Update a task of the actor's team.

        Args:
            actor: Updating user
            task_id: Task to update
            changes: Field values to apply; `assigned_to=None` clears the assignee

        Returns:
            Tuple of (updated task, its project)

        Raises:
            NotFoundError: If the task is not in the actor's team
            NotAuthorizedError: If the actor's role may not make this change
            ValidationError: If a field is unknown or null, or the assignee is
                not a member of the team
            pydantic.ValidationError: If a trimmed value is too short or long
        """
        with logfire.span(
            "task_service.update_task",
            actor_id=str(actor.id),
            task_id=str(task_id),
            fields=sorted(changes),
        ):
            task, project = await self.get_task(actor, task_id)
            check_task_update(actor, task, changes.keys())

            unknown = set(changes) - UPDATABLE_FIELDS
            if unknown:
                raise ValidationError(
                    "Unknown task fields",
                    details=[
                        {"field": field, "message": "Field cannot be updated"}
                        for field in sorted(unknown)
                    ],
                )

            cleared = sorted(
                field
                for field, value in changes.items()
                if value is None and field not in NULLABLE_FIELDS
            )
            if cleared:
                raise ValidationError(
                    "Task fields cannot be null",
                    details=[
                        {"field": field, "message": "Field cannot be null"}
                        for field in cleared
                    ],
                )
            changes = {
                field: value.strip() if field in TEXT_FIELDS else value
                for field, value in changes.items()
            }

            assignee = None
            new_assignee = changes.get("assigned_to")
            if new_assignee is not None:
                assignee = await self._check_assignee(new_assignee, project.team_id)

            updated = Task.model_validate(
                {
                    **task.model_dump(),
                    **changes,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
            saved = await self.task_repository.save(updated)

            if new_assignee is not None and new_assignee != task.assigned_to:
                activity_type = ActivityType.TASK_ASSIGNED
                description = (
                    f'{actor.name} assigned task "{saved.title}" to '
                    f"{assignee.name if assignee else 'someone'}"
                )
            else:
                activity_type = ActivityType.TASK_UPDATED
                description = f'{actor.name} updated task "{saved.title}"'

            await self.activity_service.record(
                type=activity_type,
                description=description,
                actor_id=actor.id,
                team_id=project.team_id,
                entity_id=saved.id,
                entity_type=EntityType.TASK,
                metadata={
                    "projectName": project.name,
                    "status": saved.status.value,
                    "assignedTo": assignee.name if assignee else None,
                },
            )
            logfire.info(
                "Task updated", task_id=str(saved.id), activity=activity_type.value
            )
            return saved, project

    async def delete_task(self, actor: User, task_id: TaskId) -> None:
        """Delete a task of the actor's team.

        Raises:
            NotFoundError: If the task is not in the actor's team
        """
        with logfire.span(
            "task_service.delete_task", actor_id=str(actor.id), task_id=str(task_id)
        ):
            task, _ = await self.get_task(actor, task_id)
            await self.task_repository.delete(task.id)
            logfire.info("Task deleted", task_id=str(task.id))

    async def _visible_project_ids(
        self, caller: User, project_id: ProjectId | None = None
    ) -> list[ProjectId]:
        if project_id is not None:
            project = await self._team_project(caller, project_id)
            return [project.id]
        if caller.team_id is None:
            return []
        projects = await self.project_repository.find_by_team(caller.team_id)
        return [project.id for project in projects]

    async def _team_project(self, caller: User, project_id: ProjectId) -> Project:
        project = None
        if caller.team_id is not None:
            project = await self.project_repository.find_in_team(
                project_id, caller.team_id
            )
        if not project:
            logfire.warn("Project not found", project_id=str(project_id))
            raise NotFoundError("Project", str(project_id))
        return project

    async def _check_assignee(self, user_id: UserId, team_id: TeamId) -> User:
        assignee = await self.user_repository.find_in_team(user_id, team_id)
        if not assignee:
            logfire.warn("Assignee not in team", assignee_id=str(user_id))
            raise ValidationError(
                "Assigned user not found in team",
                details=[
                    {
                        "field": "assignedTo",
                        "message": "Assigned user not found in team",
                        "value": str(user_id),
                    }
                ],
            )
        return assignee
