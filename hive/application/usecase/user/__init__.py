"""User use cases."""

from .get_team_users import (
    GetTeamUsersRequest,
    GetTeamUsersResponse,
    GetTeamUsersUseCase,
)
from .repair_team_membership import (
    RepairTeamMembershipRequest,
    RepairTeamMembershipResponse,
    RepairTeamMembershipUseCase,
)
from .update_user_role import UpdateUserRoleRequest, UpdateUserRoleUseCase

__all__ = [
    "GetTeamUsersRequest",
    "GetTeamUsersResponse",
    "GetTeamUsersUseCase",
    "RepairTeamMembershipRequest",
    "RepairTeamMembershipResponse",
    "RepairTeamMembershipUseCase",
    "UpdateUserRoleRequest",
    "UpdateUserRoleUseCase",
]
