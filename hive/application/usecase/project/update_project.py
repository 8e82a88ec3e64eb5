"""Update project use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from hive.application.view import ProjectView
from hive.domain.model import User
from hive.domain.repository import Transaction
from hive.domain.service import Broadcaster, ProjectService
from hive.domain.service.access import MANAGERS, require_role
from hive.domain.value import ProjectId, RealtimeEvent


class UpdateProjectRequest(BaseModel):
    """Update project request.

    `changes` only holds fields the client actually sent.
    """

    caller: User
    project_id: UUID
    changes: dict[str, Any]


class UpdateProjectUseCase:
    """Use case for updating a project and notifying the team room."""

    def __init__(
        self,
        project_service: ProjectService,
        transaction: Transaction,
        broadcaster: Broadcaster,
    ) -> None:
        """Initialize update project use case.

        Args:
            project_service: Project domain service
            transaction: Request transaction, committed before the push
            broadcaster: Team room broadcaster
        """
        self.project_service = project_service
        self.transaction = transaction
        self.broadcaster = broadcaster

    async def execute(self, request: UpdateProjectRequest) -> ProjectView:
        """Execute update project flow.

        Steps:
        1. Check the caller's role
        2. Update via project service (records `project_updated`)
        3. Commit, then push `project-update-received` to the team room

        Raises:
            NotAuthorizedError: If the caller is not ADMIN or MANAGER
            NotFoundError: If the project is not in the caller's team
        """
        require_role(request.caller, MANAGERS)
        project = await self.project_service.update_project(
            request.caller, ProjectId(request.project_id), request.changes
        )
        view = ProjectView.of(project)
        await self.transaction.commit()
        await self.broadcaster.broadcast(
            project.team_id,
            RealtimeEvent.PROJECT_UPDATE_RECEIVED,
            view.model_dump(mode="json", by_alias=True),
        )
        return view
