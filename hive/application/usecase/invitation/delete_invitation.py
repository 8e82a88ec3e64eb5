"""Delete invitation use case."""

from uuid import UUID

from pydantic import BaseModel

from hive.domain.error import NotFoundError
from hive.domain.model import User
from hive.domain.service import InvitationService
from hive.domain.service.access import MANAGERS, require_role
from hive.domain.value import InvitationId


class DeleteInvitationRequest(BaseModel):
    """Delete invitation request."""

    caller: User
    invitation_id: UUID


class DeleteInvitationUseCase:
    """Use case for revoking an invitation of the caller's team."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: DeleteInvitationRequest) -> None:
        """Delete an invitation.

        Raises:
            NotAuthorizedError: If the caller is not ADMIN or MANAGER
            NotFoundError: If the invitation is not in the caller's team
        """
        require_role(request.caller, MANAGERS)
        if request.caller.team_id is None:
            raise NotFoundError("Invitation", str(request.invitation_id))
        await self.invitation_service.delete_invitation(
            InvitationId(request.invitation_id), request.caller.team_id
        )
