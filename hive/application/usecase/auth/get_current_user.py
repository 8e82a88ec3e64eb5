"""Get current user use case."""

import logfire
from pydantic import BaseModel

from hive.application.view import TeamView, UserView
from hive.domain.model import User
from hive.domain.service import IdentityService, TeamService, UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None  # Bearer token without the scheme


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user: UserView
    team: TeamView | None = None


class GetCurrentUserUseCase:
    """Use case for resolving the caller of a request.

    Every authenticated route and the realtime channel go through
    `resolve`: it verifies the token, creates the local user on first
    sight, and repairs users that lost their team.
    """

    def __init__(
        self,
        identity_service: IdentityService,
        user_service: UserService,
        team_service: TeamService,
    ) -> None:
        """Initialize get current user use case.

        Args:
            identity_service: Token verification service
            user_service: User domain service
            team_service: Team membership service
        """
        self.identity_service = identity_service
        self.user_service = user_service
        self.team_service = team_service

    async def resolve(self, token: str | None) -> User:
        """Resolve a bearer token to a team-assigned user.

        Args:
            token: Raw bearer token

        Returns:
            The caller, always assigned to a team

        Raises:
            AuthenticationError: If the token is missing or invalid
        """
        claims = await self.identity_service.verify_token(token)

        user = await self.user_service.get_by_external_id(claims.subject)
        if user is None:
            user = await self.user_service.create_user(claims)
            logfire.info("User created on first sight", user_id=str(user.id))

        if user.team_id is None:
            user = await self.team_service.assign_default_team(user)

        return user

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Args:
            request: Request carrying the bearer token

        Returns:
            The caller and their team
        """
        user = await self.resolve(request.token)
        team = (
            await self.team_service.get_by_id(user.team_id) if user.team_id else None
        )
        return GetCurrentUserResponse(
            user=UserView.of(user),
            team=TeamView.of(team) if team else None,
        )
