"""Create task use case."""

from uuid import UUID

from pydantic import BaseModel

from hive.application.view import TaskView
from hive.domain.model import User
from hive.domain.service import TaskService, UserService
from hive.domain.service.access import MANAGERS, require_role
from hive.domain.value import ProjectId, TaskStatus, UserId


class CreateTaskRequest(BaseModel):
    """Create task request."""

    caller: User
    project_id: UUID
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    assigned_to: UUID | None = None


class CreateTaskUseCase:
    """Use case for creating a task in a project of the caller's team."""

    def __init__(self, task_service: TaskService, user_service: UserService) -> None:
        self.task_service = task_service
        self.user_service = user_service

    async def execute(self, request: CreateTaskRequest) -> TaskView:
        """Create a task.

        Raises:
            NotAuthorizedError: If the caller is not ADMIN or MANAGER
            NotFoundError: If the project is not in the caller's team
            ValidationError: If the assignee is not in the team
        """
        require_role(request.caller, MANAGERS)
        task, project = await self.task_service.create_task(
            actor=request.caller,
            project_id=ProjectId(request.project_id),
            title=request.title,
            description=request.description,
            status=request.status,
            assigned_to=UserId(request.assigned_to) if request.assigned_to else None,
        )
        assignee = (
            await self.user_service.get_in_team(task.assigned_to, project.team_id)
            if task.assigned_to
            else None
        )
        return TaskView.of(task, project, assignee)
