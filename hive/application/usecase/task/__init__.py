"""Task use cases."""

from .create_task import CreateTaskRequest, CreateTaskUseCase
from .delete_task import DeleteTaskRequest, DeleteTaskUseCase
from .get_task import GetTaskRequest, GetTaskUseCase
from .get_task_stats import GetTaskStatsRequest, GetTaskStatsUseCase, TaskStatsResponse
from .list_tasks import ListTasksRequest, ListTasksResponse, ListTasksUseCase
from .update_task import UpdateTaskRequest, UpdateTaskUseCase

__all__ = [
    "CreateTaskRequest",
    "CreateTaskUseCase",
    "DeleteTaskRequest",
    "DeleteTaskUseCase",
    "GetTaskRequest",
    "GetTaskUseCase",
    "GetTaskStatsRequest",
    "GetTaskStatsUseCase",
    "ListTasksRequest",
    "ListTasksResponse",
    "ListTasksUseCase",
    "TaskStatsResponse",
    "UpdateTaskRequest",
    "UpdateTaskUseCase",
]
