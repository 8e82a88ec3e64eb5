"""Unit tests for the team member use cases."""

import pytest

from hive.application.usecase.user import (
    GetTeamUsersRequest,
    GetTeamUsersUseCase,
    RepairTeamMembershipRequest,
    RepairTeamMembershipUseCase,
    UpdateUserRoleRequest,
    UpdateUserRoleUseCase,
)
from hive.domain.error import NotAuthorizedError
from hive.domain.value import Role
from tests.harness import create_env_fixture, make_staffed_team, make_user

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateUserRole:
    """Tests for UpdateUserRoleUseCase."""

    @pytest.mark.asyncio
    async def test_admin_promotes_member(self, unit_env):
        update = await unit_env.get(UpdateUserRoleUseCase)
        staff = await make_staffed_team(unit_env)

        view = await update.execute(
            UpdateUserRoleRequest(
                caller=staff.admin, user_id=staff.member.id, role=Role.MANAGER
            )
        )

        assert view.role == Role.MANAGER

    @pytest.mark.asyncio
    async def test_manager_cannot_change_roles(self, unit_env):
        update = await unit_env.get(UpdateUserRoleUseCase)
        staff = await make_staffed_team(unit_env)

        with pytest.raises(NotAuthorizedError):
            await update.execute(
                UpdateUserRoleRequest(
                    caller=staff.manager, user_id=staff.member.id, role=Role.MANAGER
                )
            )


class TestGetTeamUsers:
    """Tests for GetTeamUsersUseCase."""

    @pytest.mark.asyncio
    async def test_lists_only_the_callers_team(self, unit_env):
        list_users = await unit_env.get(GetTeamUsersUseCase)
        staff = await make_staffed_team(unit_env)
        await make_staffed_team(unit_env, prefix="other")

        response = await list_users.execute(GetTeamUsersRequest(caller=staff.member))

        assert [u.id for u in response.users] == [
            staff.admin.id,
            staff.manager.id,
            staff.member.id,
        ]

    @pytest.mark.asyncio
    async def test_user_without_team_sees_nobody(self, unit_env):
        list_users = await unit_env.get(GetTeamUsersUseCase)
        loner = await make_user(unit_env, "loner")

        response = await list_users.execute(GetTeamUsersRequest(caller=loner))

        assert response.users == []


class TestRepairTeamMembership:
    """Tests for RepairTeamMembershipUseCase."""

    @pytest.mark.asyncio
    async def test_reports_fixed_users(self, unit_env):
        repair = await unit_env.get(RepairTeamMembershipUseCase)
        staff = await make_staffed_team(unit_env)
        stray = await make_user(unit_env, "dave")

        response = await repair.execute(RepairTeamMembershipRequest(caller=staff.admin))

        assert response.total_users == 4
        assert response.users_fixed == 1
        assert response.users_in_team == 4
        assert response.team.id == staff.team.id
        assert stray.id in response.team.member_ids

    @pytest.mark.asyncio
    async def test_member_cannot_run_repair(self, unit_env):
        repair = await unit_env.get(RepairTeamMembershipUseCase)
        staff = await make_staffed_team(unit_env)

        with pytest.raises(NotAuthorizedError):
            await repair.execute(RepairTeamMembershipRequest(caller=staff.member))
