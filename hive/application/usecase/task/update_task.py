"""Update task use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from hive.application.view import TaskView
from hive.domain.model import User
from hive.domain.repository import Transaction
from hive.domain.service import Broadcaster, TaskService, UserService
from hive.domain.service.access import ALL_ROLES, require_role
from hive.domain.value import RealtimeEvent, TaskId


class UpdateTaskRequest(BaseModel):
    """Update task request.

    `changes` only holds fields the client actually sent, keyed by domain
    field name (title, description, status, assigned_to).
    """

    caller: User
    task_id: UUID
    changes: dict[str, Any]


class UpdateTaskUseCase:
    """Use case for updating a task and notifying the team room."""

    def __init__(
        self,
        task_service: TaskService,
        user_service: UserService,
        transaction: Transaction,
        broadcaster: Broadcaster,
    ) -> None:
        """Initialize update task use case.

        Args:
            task_service: Task domain service
            user_service: User service (for populating the view)
            transaction: Request transaction, committed before the push
            broadcaster: Team room broadcaster
        """
        self.task_service = task_service
        self.user_service = user_service
        self.transaction = transaction
        self.broadcaster = broadcaster

    async def execute(self, request: UpdateTaskRequest) -> TaskView:
        """Execute update task flow.

        Steps:
        1. Load the task within the caller's team
        2. Apply the per-role field gate and update (records the activity)
        3. Commit, then push `task-update-received` to the team room

        Raises:
            NotFoundError: If the task is missing or belongs to another team
            NotAuthorizedError: If the caller's role may not make the change
            ValidationError: If the assignee is not in the team
        """
        require_role(request.caller, ALL_ROLES)
        task, project = await self.task_service.update_task(
            request.caller, TaskId(request.task_id), request.changes
        )
        assignee = (
            await self.user_service.get_in_team(task.assigned_to, project.team_id)
            if task.assigned_to
            else None
        )
        view = TaskView.of(task, project, assignee)
        await self.transaction.commit()
        await self.broadcaster.broadcast(
            project.team_id,
            RealtimeEvent.TASK_UPDATE_RECEIVED,
            view.model_dump(mode="json", by_alias=True),
        )
        return view
