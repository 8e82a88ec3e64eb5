"""List invitations use case."""

from datetime import datetime, timezone

from pydantic import BaseModel

from hive.application.view import InvitationView
from hive.domain.model import User
from hive.domain.service import InvitationService, UserService
from hive.domain.service.access import MANAGERS, require_role


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    caller: User


class ListInvitationsResponse(BaseModel):
    """List invitations response."""

    invitations: list[InvitationView]


class ListInvitationsUseCase:
    """Use case for listing the team's unexpired invitations."""

    def __init__(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> None:
        self.invitation_service = invitation_service
        self.user_service = user_service

    async def execute(self, request: ListInvitationsRequest) -> ListInvitationsResponse:
        """List invitations, newest first, with creator and consumer embedded."""
        require_role(request.caller, MANAGERS)
        if request.caller.team_id is None:
            return ListInvitationsResponse(invitations=[])

        invitations = await self.invitation_service.list_invitations(
            request.caller.team_id
        )
        user_ids = [i.created_by for i in invitations]
        user_ids += [i.used_by for i in invitations if i.used_by]
        users = await self.user_service.get_many(user_ids)

        now = datetime.now(timezone.utc)
        return ListInvitationsResponse(
            invitations=[
                InvitationView.of(
                    i,
                    now,
                    creator=users.get(i.created_by),
                    consumer=users.get(i.used_by) if i.used_by else None,
                )
                for i in invitations
            ]
        )
