"""Project use cases."""

from .create_project import CreateProjectRequest, CreateProjectUseCase
from .delete_project import DeleteProjectRequest, DeleteProjectUseCase
from .get_project import GetProjectRequest, GetProjectUseCase
from .list_projects import (
    ListProjectsRequest,
    ListProjectsResponse,
    ListProjectsUseCase,
)
from .update_project import UpdateProjectRequest, UpdateProjectUseCase

__all__ = [
    "CreateProjectRequest",
    "CreateProjectUseCase",
    "DeleteProjectRequest",
    "DeleteProjectUseCase",
    "GetProjectRequest",
    "GetProjectUseCase",
    "ListProjectsRequest",
    "ListProjectsResponse",
    "ListProjectsUseCase",
    "UpdateProjectRequest",
    "UpdateProjectUseCase",
]
