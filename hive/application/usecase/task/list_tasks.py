"""List tasks use case."""

from uuid import UUID

from pydantic import BaseModel

from hive.application.view import TaskView, task_views
from hive.domain.model import User
from hive.domain.service import ProjectService, TaskService, UserService
from hive.domain.service.access import ALL_ROLES, require_role
from hive.domain.value import ProjectId, SortOrder, TaskSortField, TaskStatus, UserId


class ListTasksRequest(BaseModel):
    """List tasks request."""

    caller: User
    project_id: UUID | None = None
    status: TaskStatus | None = None
    assigned_to: UUID | None = None
    search: str | None = None
    sort_by: TaskSortField = TaskSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC


class ListTasksResponse(BaseModel):
    """List tasks response."""

    tasks: list[TaskView]


class ListTasksUseCase:
    """Use case for listing caller-visible tasks with filters and sorting."""

    def __init__(
        self,
        task_service: TaskService,
        project_service: ProjectService,
        user_service: UserService,
    ) -> None:
        """Initialize list tasks use case.

        Args:
            task_service: Task domain service
            project_service: Project service (for populating views)
            user_service: User service (for populating views)
        """
        self.task_service = task_service
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: ListTasksRequest) -> ListTasksResponse:
        """List tasks.

        Raises:
            NotFoundError: If the project filter is not in the caller's team
        """
        require_role(request.caller, ALL_ROLES)
        tasks = await self.task_service.list_tasks(
            request.caller,
            project_id=ProjectId(request.project_id) if request.project_id else None,
            status=request.status,
            assigned_to=UserId(request.assigned_to) if request.assigned_to else None,
            search=request.search,
            sort_field=request.sort_by,
            order=request.sort_order,
        )
        views = await task_views(tasks, self.project_service, self.user_service)
        return ListTasksResponse(tasks=views)
