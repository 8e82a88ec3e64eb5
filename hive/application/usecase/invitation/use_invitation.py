"""Use invitation use case."""

from pydantic import BaseModel

from hive.application.view import TeamView, UserView
from hive.domain.error import NotFoundError
from hive.domain.model import User
from hive.domain.service import InvitationService
from hive.domain.value import InvitationCode


class UseInvitationRequest(BaseModel):
    """Use invitation request."""

    caller: User
    code: str


class UseInvitationResponse(BaseModel):
    """Use invitation response."""

    user: UserView
    team: TeamView


class UseInvitationUseCase:
    """Use case for joining a team through an invitation code."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: UseInvitationRequest) -> UseInvitationResponse:
        """Consume the invitation and move the caller into its team.

        Raises:
            NotFoundError: If the invitation is not active (including a
                second use of the same code)
            NotAuthorizedError: If it targets a different email
        """
        try:
            code = InvitationCode(request.code.strip().lower())
        except ValueError:
            raise NotFoundError("Invitation", request.code[:8] + "...")

        user, team = await self.invitation_service.use_invitation(
            request.caller, code
        )
        return UseInvitationResponse(user=UserView.of(user), team=TeamView.of(team))
