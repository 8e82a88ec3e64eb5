"""Delete task use case."""

from uuid import UUID

from pydantic import BaseModel

from hive.domain.model import User
from hive.domain.service import TaskService
from hive.domain.service.access import MANAGERS, require_role
from hive.domain.value import TaskId


class DeleteTaskRequest(BaseModel):
    """Delete task request."""

    caller: User
    task_id: UUID


class DeleteTaskUseCase:
    """Use case for deleting a task of the caller's team."""

    def __init__(self, task_service: TaskService) -> None:
        self.task_service = task_service

    async def execute(self, request: DeleteTaskRequest) -> None:
        """Delete a task.

        Raises:
            NotAuthorizedError: If the caller is not ADMIN or MANAGER
            NotFoundError: If the task is missing or belongs to another team
        """
        require_role(request.caller, MANAGERS)
        await self.task_service.delete_task(request.caller, TaskId(request.task_id))
