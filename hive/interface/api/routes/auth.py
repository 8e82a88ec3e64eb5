"""Authentication routes.

Sign-in happens against the identity provider; these routes turn a verified
ID token into a local user.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Response, status
import logfire
from pydantic import BaseModel, Field

from hive.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from hive.domain.error import AuthenticationError
from hive.domain.value import Role
from hive.interface.api.caller import bearer_token
from hive.interface.api.envelope import Envelope
from hive.interface.error import unauthenticated

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registering after signing in with the provider."""

    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=254)
    name: str = Field(min_length=2, max_length=50)
    role: Role | None = None


@router.post(
    "/register",
    response_model=Envelope[RegisterResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterAPIRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[RegisterResponse]:
    """Register the signed-in identity as a local user.

    The first user ever becomes ADMIN of a fresh default team; everyone else
    joins the default team. Registering an already known email or identity
    returns the existing user with status 200.

    Args:
        request: Registration data
        response: Outgoing response (status is lowered to 200 for known users)
        register_use_case: Register use case from DI
        authorization: Bearer ID token

    Returns:
        Envelope with the user (and the team for the founding user)

    Raises:
        HTTPException: If the token is missing or invalid
    """
    try:
        result = await register_use_case.execute(
            RegisterRequest(
                token=bearer_token(authorization),
                email=request.email,
                name=request.name,
                role=request.role,
            )
        )
    except AuthenticationError as e:
        logfire.warn("Registration rejected", error=str(e))
        raise unauthenticated() from e

    if not result.created:
        response.status_code = status.HTTP_200_OK
    return Envelope(data=result)


@router.get("/login", response_model=Envelope[GetCurrentUserResponse])
async def login(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[GetCurrentUserResponse]:
    """Return the signed-in user and their team.

    Creates the user on first sight and repairs a missing team assignment.

    Args:
        get_current_user_use_case: Get current user use case from DI
        authorization: Bearer ID token

    Returns:
        Envelope with the current user and team

    Raises:
        HTTPException: If the token is missing or invalid
    """
    try:
        result = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=bearer_token(authorization))
        )
    except AuthenticationError as e:
        raise unauthenticated() from e
    return Envelope(data=result)
