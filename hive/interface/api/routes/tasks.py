"""Task routes."""

from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_snake

from hive.application.usecase.auth import GetCurrentUserUseCase
from hive.application.usecase.base import WireModel
from hive.application.usecase.task import (
    CreateTaskRequest,
    CreateTaskUseCase,
    DeleteTaskRequest,
    DeleteTaskUseCase,
    GetTaskRequest,
    GetTaskStatsRequest,
    GetTaskStatsUseCase,
    GetTaskUseCase,
    ListTasksRequest,
    ListTasksUseCase,
    TaskStatsResponse,
    UpdateTaskRequest,
    UpdateTaskUseCase,
)
from hive.application.view import TaskView
from hive.domain.error import DomainError
from hive.domain.value import SortOrder, TaskSortField, TaskStatus
from hive.interface.api.caller import authenticate
from hive.interface.api.envelope import Envelope
from hive.interface.error import http_error

router = APIRouter(prefix="/tasks", tags=["tasks"], route_class=DishkaRoute)


def _blank_to_none(value: Any) -> Any:
    """Treat an empty assignee as "no assignee"."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class CreateTaskAPIRequest(WireModel):
    """API request for creating a task."""

    title: str = Field(min_length=3, max_length=200)
    description: str = Field(default="", max_length=1000)
    project_id: UUID
    status: TaskStatus = TaskStatus.TODO
    assigned_to: UUID | None = None

    @field_validator("assigned_to", mode="before")
    @classmethod
    def blank_assignee(cls, v: Any) -> Any:
        return _blank_to_none(v)


class UpdateTaskAPIRequest(WireModel):
    """API request for updating a task.

    Only the fields present in the body are applied; an empty or null
    `assignedTo` clears the assignment. Unrecognised keys and explicit nulls
    are passed through so the per-role field gate sees every submitted key.
    """

    model_config = ConfigDict(extra="allow")

    title: str | None = Field(default=None, min_length=3, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    status: TaskStatus | None = None
    assigned_to: UUID | None = None

    @field_validator("assigned_to", mode="before")
    @classmethod
    def blank_assignee(cls, v: Any) -> Any:
        return _blank_to_none(v)

    def changes(self) -> dict[str, Any]:
        """Every key the client sent, keyed by domain field name."""
        changes = {
            field: getattr(self, field)
            for field in self.model_fields_set
            if field in type(self).model_fields
        }
        for key, value in (self.model_extra or {}).items():
            changes[to_snake(key)] = value
        return changes


@router.get("", response_model=Envelope[list[TaskView]])
async def list_tasks(
    list_tasks_use_case: FromDishka[ListTasksUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    project_id: UUID | None = Query(default=None, alias="projectId"),
    status_filter: TaskStatus | None = Query(default=None, alias="status"),
    assigned_to: UUID | None = Query(default=None, alias="assignedTo"),
    search: str | None = Query(default=None, max_length=200),
    sort_by: TaskSortField = Query(default=TaskSortField.CREATED_AT, alias="sortBy"),
    sort_order: SortOrder = Query(default=SortOrder.DESC, alias="sortOrder"),
) -> Envelope[list[TaskView]]:
    """List tasks of the caller's team.

    MEMBER callers only ever see tasks assigned to them.

    Args:
        list_tasks_use_case: List tasks use case from DI
        get_current_user_use_case: Caller resolution from DI
        authorization: Bearer ID token
        project_id: Only tasks of this project (must be in the team)
        status_filter: Only tasks with this status
        assigned_to: Only tasks assigned to this user
        search: Case-insensitive substring of title or description
        sort_by: Sort column
        sort_order: Sort direction

    Returns:
        Envelope with the populated tasks
    """
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        result = await list_tasks_use_case.execute(
            ListTasksRequest(
                caller=caller,
                project_id=project_id,
                status=status_filter,
                assigned_to=assigned_to,
                search=search,
                sort_by=sort_by,
                sort_order=sort_order,
            )
        )
    except DomainError as e:
        raise http_error(e, "List tasks") from e
    return Envelope(data=result.tasks)


@router.get("/stats", response_model=Envelope[TaskStatsResponse])
async def get_task_stats(
    get_task_stats_use_case: FromDishka[GetTaskStatsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[TaskStatsResponse]:
    """Count the caller-visible tasks by status."""
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        stats = await get_task_stats_use_case.execute(
            GetTaskStatsRequest(caller=caller)
        )
    except DomainError as e:
        raise http_error(e, "Task stats") from e
    return Envelope(data=stats)


@router.get("/{task_id}", response_model=Envelope[TaskView])
async def get_task(
    task_id: UUID,
    get_task_use_case: FromDishka[GetTaskUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[TaskView]:
    """Get a task of the caller's team.

    Raises:
        HTTPException: 404 if the task is missing or its project is in another team
    """
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        task = await get_task_use_case.execute(
            GetTaskRequest(caller=caller, task_id=task_id)
        )
    except DomainError as e:
        raise http_error(e, "Get task") from e
    return Envelope(data=task)


@router.post("", response_model=Envelope[TaskView], status_code=status.HTTP_201_CREATED)
async def create_task(
    request: CreateTaskAPIRequest,
    create_task_use_case: FromDishka[CreateTaskUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[TaskView]:
    """Create a task in a project of the caller's team.

    Requires ADMIN or MANAGER.

    Raises:
        HTTPException: 404 if the project is not in the team, 400 if the
            assignee is not a team member
    """
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        task = await create_task_use_case.execute(
            CreateTaskRequest(
                caller=caller,
                project_id=request.project_id,
                title=request.title,
                description=request.description,
                status=request.status,
                assigned_to=request.assigned_to,
            )
        )
    except DomainError as e:
        raise http_error(e, "Create task") from e
    return Envelope(data=task)


@router.put("/{task_id}", response_model=Envelope[TaskView])
async def update_task(
    task_id: UUID,
    request: UpdateTaskAPIRequest,
    update_task_use_case: FromDishka[UpdateTaskUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[TaskView]:
    """Update a task and push it to the team room.

    MEMBER callers may only change the status of tasks assigned to them;
    any other field is rejected with 403.
    """
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        task = await update_task_use_case.execute(
            UpdateTaskRequest(caller=caller, task_id=task_id, changes=request.changes())
        )
    except (DomainError, ValueError) as e:
        raise http_error(e, "Update task") from e
    return Envelope(data=task)


@router.delete("/{task_id}", response_model=Envelope[None])
async def delete_task(
    task_id: UUID,
    delete_task_use_case: FromDishka[DeleteTaskUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[None]:
    """Delete a task. Requires ADMIN or MANAGER."""
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        await delete_task_use_case.execute(
            DeleteTaskRequest(caller=caller, task_id=task_id)
        )
    except DomainError as e:
        raise http_error(e, "Delete task") from e
    return Envelope(message="Task deleted successfully")
