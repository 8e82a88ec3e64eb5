"""Get task use case."""

from uuid import UUID

from pydantic import BaseModel

from hive.application.view import TaskView
from hive.domain.model import User
from hive.domain.service import TaskService, UserService
from hive.domain.service.access import ALL_ROLES, require_role
from hive.domain.value import TaskId


class GetTaskRequest(BaseModel):
    """Get task request."""

    caller: User
    task_id: UUID


class GetTaskUseCase:
    """Use case for reading one task of the caller's team."""

    def __init__(self, task_service: TaskService, user_service: UserService) -> None:
        self.task_service = task_service
        self.user_service = user_service

    async def execute(self, request: GetTaskRequest) -> TaskView:
        """Get a populated task.

        Raises:
            NotFoundError: If the task is missing or belongs to another team
        """
        require_role(request.caller, ALL_ROLES)
        task, project = await self.task_service.get_task(
            request.caller, TaskId(request.task_id)
        )
        assignee = (
            await self.user_service.get_in_team(task.assigned_to, project.team_id)
            if task.assigned_to
            else None
        )
        return TaskView.of(task, project, assignee)
