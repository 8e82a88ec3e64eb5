"""Team member routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from hive.application.usecase.auth import GetCurrentUserUseCase
from hive.application.usecase.base import WireModel
from hive.application.usecase.user import (
    GetTeamUsersRequest,
    GetTeamUsersUseCase,
    RepairTeamMembershipRequest,
    RepairTeamMembershipResponse,
    RepairTeamMembershipUseCase,
    UpdateUserRoleRequest,
    UpdateUserRoleUseCase,
)
from hive.application.view import UserView
from hive.domain.error import DomainError
from hive.domain.value import Role
from hive.interface.api.caller import authenticate
from hive.interface.api.envelope import Envelope
from hive.interface.error import http_error

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserRoleAPIRequest(WireModel):
    """API request for changing a member's role."""

    role: Role


@router.get("/team", response_model=Envelope[list[UserView]])
async def get_team_users(
    get_team_users_use_case: FromDishka[GetTeamUsersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[list[UserView]]:
    """List the caller's team, admins first, then by name."""
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        result = await get_team_users_use_case.execute(
            GetTeamUsersRequest(caller=caller)
        )
    except DomainError as e:
        raise http_error(e, "Get team users") from e
    return Envelope(data=result.users)


@router.get("/debug-team", response_model=Envelope[RepairTeamMembershipResponse])
async def repair_team_membership(
    repair_team_membership_use_case: FromDishka[RepairTeamMembershipUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[RepairTeamMembershipResponse]:
    """Assign every unassigned user to the default team and report totals.

    Requires ADMIN. Safe to call repeatedly.
    """
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        report = await repair_team_membership_use_case.execute(
            RepairTeamMembershipRequest(caller=caller)
        )
    except DomainError as e:
        raise http_error(e, "Repair team membership") from e
    return Envelope(
        data=report,
        message=f"Team membership repaired: {report.users_fixed} users fixed",
    )


@router.put("/{user_id}/role", response_model=Envelope[UserView])
async def update_user_role(
    user_id: UUID,
    request: UpdateUserRoleAPIRequest,
    update_user_role_use_case: FromDishka[UpdateUserRoleUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[UserView]:
    """Change the role of a team member.

    Requires ADMIN. The only ADMIN of a team cannot demote themselves.

    Args:
        user_id: Member to update
        request: New role
        update_user_role_use_case: Update role use case from DI
        get_current_user_use_case: Caller resolution from DI
        authorization: Bearer ID token

    Returns:
        Envelope with the updated user

    Raises:
        HTTPException: 400 for the only-admin rule, 404 if the user is not
            in the caller's team
    """
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        user = await update_user_role_use_case.execute(
            UpdateUserRoleRequest(caller=caller, user_id=user_id, role=request.role)
        )
    except DomainError as e:
        raise http_error(e, "Update user role") from e
    return Envelope(data=user)
