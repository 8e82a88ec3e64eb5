"""Invitation routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import Field

from hive.application.usecase.auth import GetCurrentUserUseCase
from hive.application.usecase.base import WireModel
from hive.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
    DeleteInvitationRequest,
    DeleteInvitationUseCase,
    ListInvitationsRequest,
    ListInvitationsUseCase,
    UseInvitationRequest,
    UseInvitationResponse,
    UseInvitationUseCase,
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)
from hive.application.view import InvitationView
from hive.domain.error import DomainError
from hive.domain.value import Role
from hive.interface.api.caller import authenticate
from hive.interface.api.envelope import Envelope
from hive.interface.error import http_error

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


class CreateInvitationAPIRequest(WireModel):
    """API request for creating an invitation."""

    email: str | None = Field(
        default=None, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=254
    )
    role: Role = Role.MEMBER


class UseInvitationAPIRequest(WireModel):
    """API request for joining a team with an invitation code."""

    code: str = Field(min_length=1, max_length=128)


@router.get("/validate/{code}", response_model=Envelope[ValidateInvitationResponse])
async def validate_invitation(
    code: str,
    validate_invitation_use_case: FromDishka[ValidateInvitationUseCase],
) -> Envelope[ValidateInvitationResponse]:
    """Check an invitation code without consuming it.

    Public: used by the join page before the visitor signs in.

    Raises:
        HTTPException: 404 unless the invitation is active
    """
    try:
        result = await validate_invitation_use_case.execute(
            ValidateInvitationRequest(code=code)
        )
    except DomainError as e:
        raise http_error(e, "Validate invitation") from e
    return Envelope(data=result)


@router.post("/use", response_model=Envelope[UseInvitationResponse])
async def use_invitation(
    request: UseInvitationAPIRequest,
    use_invitation_use_case: FromDishka[UseInvitationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[UseInvitationResponse]:
    """Join the invitation's team with the invited role.

    Args:
        request: Invitation code
        use_invitation_use_case: Use invitation use case from DI
        get_current_user_use_case: Caller resolution from DI
        authorization: Bearer ID token

    Returns:
        Envelope with the updated user and the joined team

    Raises:
        HTTPException: 404 unless the invitation is active (a code works
            once), 403 if it targets a different email
    """
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        result = await use_invitation_use_case.execute(
            UseInvitationRequest(caller=caller, code=request.code)
        )
    except DomainError as e:
        raise http_error(e, "Use invitation") from e
    return Envelope(data=result, message=f"Joined {result.team.name}")


@router.post(
    "",
    response_model=Envelope[CreateInvitationResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_invitation(
    request: CreateInvitationAPIRequest,
    create_invitation_use_case: FromDishka[CreateInvitationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[CreateInvitationResponse]:
    """Create an invitation to the caller's team.

    Requires ADMIN or MANAGER; a MANAGER cannot invite ADMINs.
    """
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        result = await create_invitation_use_case.execute(
            CreateInvitationRequest(caller=caller, email=request.email, role=request.role)
        )
    except DomainError as e:
        raise http_error(e, "Create invitation") from e
    return Envelope(data=result)


@router.get("", response_model=Envelope[list[InvitationView]])
async def list_invitations(
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[list[InvitationView]]:
    """List the team's unexpired invitations, newest first."""
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        result = await list_invitations_use_case.execute(
            ListInvitationsRequest(caller=caller)
        )
    except DomainError as e:
        raise http_error(e, "List invitations") from e
    return Envelope(data=result.invitations)


@router.delete("/{invitation_id}", response_model=Envelope[None])
async def delete_invitation(
    invitation_id: UUID,
    delete_invitation_use_case: FromDishka[DeleteInvitationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[None]:
    """Revoke an invitation of the caller's team."""
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        await delete_invitation_use_case.execute(
            DeleteInvitationRequest(caller=caller, invitation_id=invitation_id)
        )
    except DomainError as e:
        raise http_error(e, "Delete invitation") from e
    return Envelope(message="Invitation deleted successfully")
