"""Validate invitation use case."""

from pydantic import BaseModel

from hive.application.usecase.base import WireModel
from hive.domain.error import NotFoundError
from hive.domain.service import InvitationService
from hive.domain.value import InvitationCode, Role


class ValidateInvitationRequest(BaseModel):
    """Validate invitation request."""

    code: str


class ValidateInvitationResponse(WireModel):
    """What the join page shows before the user accepts."""

    team_name: str
    team_description: str
    role: Role
    email: str | None


class ValidateInvitationUseCase:
    """Use case for checking an invitation code without consuming it.

    Public: no authentication, no side effects.
    """

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(
        self, request: ValidateInvitationRequest
    ) -> ValidateInvitationResponse:
        """Validate a code.

        Raises:
            NotFoundError: If the code is malformed, unknown, used or expired
        """
        try:
            code = InvitationCode(request.code.strip().lower())
        except ValueError:
            raise NotFoundError("Invitation", request.code[:8] + "...")

        invitation, team = await self.invitation_service.validate_invitation(code)
        return ValidateInvitationResponse(
            team_name=team.name,
            team_description=team.description,
            role=invitation.role,
            email=invitation.email,
        )
