"""Task statistics use case."""

from pydantic import BaseModel

from hive.application.usecase.base import WireModel
from hive.domain.model import User
from hive.domain.service import TaskService
from hive.domain.service.access import ALL_ROLES, require_role


class GetTaskStatsRequest(BaseModel):
    """Task statistics request."""

    caller: User


class TaskStatsResponse(WireModel):
    """Task counts per status (`inProgress` on the wire)."""

    total: int
    todo: int
    in_progress: int
    done: int


class GetTaskStatsUseCase:
    """Use case for counting caller-visible tasks per status."""

    def __init__(self, task_service: TaskService) -> None:
        self.task_service = task_service

    async def execute(self, request: GetTaskStatsRequest) -> TaskStatsResponse:
        """Compute task statistics for the caller."""
        require_role(request.caller, ALL_ROLES)
        stats = await self.task_service.get_stats(request.caller)
        return TaskStatsResponse(
            total=stats.total,
            todo=stats.todo,
            in_progress=stats.in_progress,
            done=stats.done,
        )
