"""Register use case."""

import logfire
from pydantic import BaseModel

from hive.application.view import TeamView, UserView
from hive.config import AuthSettings
from hive.domain.service import IdentityService, TeamService, UserService
from hive.domain.value import Role


class RegisterRequest(BaseModel):
    """Register request."""

    token: str | None
    email: str | None = None  # Defaults to the token's email claim
    name: str | None = None  # Defaults to the token's name claim
    role: Role | None = None


class RegisterResponse(BaseModel):
    """Register response.

    `team` is only set for the founding user, who gets a fresh team.
    """

    user: UserView
    team: TeamView | None = None
    created: bool


class RegisterUseCase:
    """Use case for explicit registration after signing in with the provider."""

    def __init__(
        self,
        identity_service: IdentityService,
        user_service: UserService,
        team_service: TeamService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize register use case.

        Args:
            identity_service: Token verification service
            user_service: User domain service
            team_service: Team membership service
            auth_settings: Auth configuration (self-assigned role switch)
        """
        self.identity_service = identity_service
        self.user_service = user_service
        self.team_service = team_service
        self.auth_settings = auth_settings

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Steps:
        1. Verify the token
        2. Return the existing user if the email or subject is known
        3. First user ever: ADMIN of a fresh default team
        4. Otherwise: MEMBER (or the requested role when allowed) joined to
           the default team

        Args:
            request: Register request

        Returns:
            Register response; `created` is False for an existing user

        Raises:
            AuthenticationError: If the token is missing or invalid
        """
        claims = await self.identity_service.verify_token(request.token)
        email = (request.email or claims.email).strip().lower()

        with logfire.span("register", subject=claims.subject, email=email):
            existing = await self.user_service.get_by_email(email)
            if existing is None:
                existing = await self.user_service.get_by_external_id(claims.subject)
            if existing is not None:
                logfire.info("User already registered", user_id=str(existing.id))
                return RegisterResponse(user=UserView.of(existing), created=False)

            if await self.user_service.count_users() == 0:
                user = await self.user_service.create_user(
                    claims, role=Role.ADMIN, email=email, name=request.name
                )
                user, team = await self.team_service.create_founding_team(user)
                logfire.info(
                    "Founding user registered",
                    user_id=str(user.id),
                    team_id=str(team.id),
                )
                return RegisterResponse(
                    user=UserView.of(user), team=TeamView.of(team), created=True
                )

            role = Role.MEMBER
            if request.role and self.auth_settings.allow_self_assigned_role:
                role = request.role

            user = await self.user_service.create_user(
                claims, role=role, email=email, name=request.name
            )
            user = await self.team_service.assign_default_team(user)
            logfire.info(
                "User registered", user_id=str(user.id), role=user.role.value
            )
            return RegisterResponse(user=UserView.of(user), created=True)
