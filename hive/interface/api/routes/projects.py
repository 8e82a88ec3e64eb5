"""Project routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import Field

from hive.application.usecase.auth import GetCurrentUserUseCase
from hive.application.usecase.base import WireModel
from hive.application.usecase.project import (
    CreateProjectRequest,
    CreateProjectUseCase,
    DeleteProjectRequest,
    DeleteProjectUseCase,
    GetProjectRequest,
    GetProjectUseCase,
    ListProjectsRequest,
    ListProjectsUseCase,
    UpdateProjectRequest,
    UpdateProjectUseCase,
)
from hive.application.view import ProjectView
from hive.domain.error import DomainError
from hive.domain.value import ProjectStatus
from hive.interface.api.caller import authenticate
from hive.interface.api.envelope import Envelope
from hive.interface.error import http_error

router = APIRouter(prefix="/projects", tags=["projects"], route_class=DishkaRoute)


class CreateProjectAPIRequest(WireModel):
    """API request for creating a project."""

    name: str = Field(min_length=3, max_length=100)
    description: str = Field(default="", max_length=500)
    status: ProjectStatus = ProjectStatus.ACTIVE


class UpdateProjectAPIRequest(WireModel):
    """API request for updating a project. Omitted fields are left alone."""

    name: str | None = Field(default=None, min_length=3, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    status: ProjectStatus | None = None


@router.get("", response_model=Envelope[list[ProjectView]])
async def list_projects(
    list_projects_use_case: FromDishka[ListProjectsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[list[ProjectView]]:
    """List the projects of the caller's team, newest first."""
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        result = await list_projects_use_case.execute(ListProjectsRequest(caller=caller))
    except DomainError as e:
        raise http_error(e, "List projects") from e
    return Envelope(data=result.projects)


@router.get("/{project_id}", response_model=Envelope[ProjectView])
async def get_project(
    project_id: UUID,
    get_project_use_case: FromDishka[GetProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[ProjectView]:
    """Get a project of the caller's team.

    Raises:
        HTTPException: 404 if the project is missing or belongs to another team
    """
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        project = await get_project_use_case.execute(
            GetProjectRequest(caller=caller, project_id=project_id)
        )
    except DomainError as e:
        raise http_error(e, "Get project") from e
    return Envelope(data=project)


@router.post(
    "", response_model=Envelope[ProjectView], status_code=status.HTTP_201_CREATED
)
async def create_project(
    request: CreateProjectAPIRequest,
    create_project_use_case: FromDishka[CreateProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[ProjectView]:
    """Create a project in the caller's team.

    Requires ADMIN or MANAGER.

    Args:
        request: Project data
        create_project_use_case: Create project use case from DI
        get_current_user_use_case: Caller resolution from DI
        authorization: Bearer ID token

    Returns:
        Envelope with the created project
    """
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        project = await create_project_use_case.execute(
            CreateProjectRequest(
                caller=caller,
                name=request.name,
                description=request.description,
                status=request.status,
            )
        )
    except DomainError as e:
        raise http_error(e, "Create project") from e
    return Envelope(data=project)


@router.put("/{project_id}", response_model=Envelope[ProjectView])
async def update_project(
    project_id: UUID,
    request: UpdateProjectAPIRequest,
    update_project_use_case: FromDishka[UpdateProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[ProjectView]:
    """Update a project and push it to the team room.

    Requires ADMIN or MANAGER. Only the fields present in the body change.
    """
    caller = await authenticate(authorization, get_current_user_use_case)
    changes = {
        field: getattr(request, field)
        for field in request.model_fields_set
        if getattr(request, field) is not None
    }
    try:
        project = await update_project_use_case.execute(
            UpdateProjectRequest(caller=caller, project_id=project_id, changes=changes)
        )
    except (DomainError, ValueError) as e:
        raise http_error(e, "Update project") from e
    return Envelope(data=project)


@router.delete("/{project_id}", response_model=Envelope[None])
async def delete_project(
    project_id: UUID,
    delete_project_use_case: FromDishka[DeleteProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[None]:
    """Delete a project and its tasks. Requires ADMIN."""
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        await delete_project_use_case.execute(
            DeleteProjectRequest(caller=caller, project_id=project_id)
        )
    except DomainError as e:
        raise http_error(e, "Delete project") from e
    return Envelope(message="Project deleted successfully")
