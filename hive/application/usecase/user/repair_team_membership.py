"""Repair team membership use case."""

from pydantic import BaseModel

from hive.application.usecase.base import WireModel
from hive.application.view import TeamView, UserView
from hive.domain.model import User
from hive.domain.service import TeamService
from hive.domain.service.access import ADMINS, require_role


class RepairTeamMembershipRequest(BaseModel):
    """Repair team membership request."""

    caller: User


class RepairTeamMembershipResponse(WireModel):
    """Repair report."""

    total_users: int
    users_in_team: int
    users_fixed: int
    team: TeamView
    members: list[UserView]


class RepairTeamMembershipUseCase:
    """Use case for assigning every unassigned user to the default team."""

    def __init__(self, team_service: TeamService) -> None:
        self.team_service = team_service

    async def execute(
        self, request: RepairTeamMembershipRequest
    ) -> RepairTeamMembershipResponse:
        """Run the repair and report totals.

        Raises:
            NotAuthorizedError: If the caller is not ADMIN
        """
        require_role(request.caller, ADMINS)
        report = await self.team_service.repair_membership(request.caller)
        return RepairTeamMembershipResponse(
            total_users=report.total_users,
            users_in_team=report.users_in_team,
            users_fixed=report.users_fixed,
            team=TeamView.of(report.team),
            members=[UserView.of(u) for u in report.members],
        )
