"""Create invitation use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from hive.application.usecase.base import WireModel
from hive.config import Settings
from hive.domain.model import User
from hive.domain.service import InvitationService
from hive.domain.service.access import MANAGERS, require_role
from hive.domain.value import Role


class CreateInvitationRequest(BaseModel):
    """Create invitation request."""

    caller: User
    email: str | None = None
    role: Role = Role.MEMBER


class CreateInvitationResponse(WireModel):
    """Create invitation response."""

    id: UUID
    code: str
    invitation_url: str
    email: str | None
    role: Role
    expires_at: datetime


class CreateInvitationUseCase:
    """Use case for issuing an invitation link to the caller's team."""

    def __init__(
        self, invitation_service: InvitationService, settings: Settings
    ) -> None:
        """Initialize create invitation use case.

        Args:
            invitation_service: Invitation domain service
            settings: Application settings (frontend URL for links)
        """
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(self, request: CreateInvitationRequest) -> CreateInvitationResponse:
        """Create an invitation.

        Raises:
            NotAuthorizedError: If the caller is not ADMIN or MANAGER, or
                requests a role above their own
        """
        require_role(request.caller, MANAGERS)
        invitation = await self.invitation_service.create_invitation(
            request.caller, email=request.email, role=request.role
        )
        return CreateInvitationResponse(
            id=invitation.id,
            code=invitation.code.root,
            invitation_url=self.settings.frontend.invitation_url(invitation.code.root),
            email=invitation.email,
            role=invitation.role,
            expires_at=invitation.expires_at,
        )
