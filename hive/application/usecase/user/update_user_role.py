"""Update user role use case."""

from uuid import UUID

from pydantic import BaseModel

from hive.application.view import UserView
from hive.domain.model import User
from hive.domain.service import UserService
from hive.domain.service.access import ADMINS, require_role
from hive.domain.value import Role, UserId


class UpdateUserRoleRequest(BaseModel):
    """Update user role request."""

    caller: User
    user_id: UUID
    role: Role


class UpdateUserRoleUseCase:
    """Use case for changing a team member's role (ADMIN only)."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateUserRoleRequest) -> UserView:
        """Change a user's role.

        Raises:
            NotAuthorizedError: If the caller is not ADMIN
            NotFoundError: If the user is not in the caller's team
            BusinessRuleViolationError: If the only admin demotes themselves
        """
        require_role(request.caller, ADMINS)
        user = await self.user_service.change_role(
            request.caller, UserId(request.user_id), request.role
        )
        return UserView.of(user)
