"""Unit tests for the invitation use cases."""

import pytest

from hive.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationUseCase,
    ListInvitationsRequest,
    ListInvitationsUseCase,
    UseInvitationRequest,
    UseInvitationUseCase,
    ValidateInvitationRequest,
    ValidateInvitationUseCase,
)
from hive.domain.error import NotAuthorizedError, NotFoundError
from hive.domain.value import InvitationState, Role
from tests.harness import create_env_fixture, make_staffed_team, make_user

# Unit test fixture
unit_env = create_env_fixture()


class TestInvitationFlow:
    """Create, validate, use and list invitations."""

    @pytest.mark.asyncio
    async def test_create_returns_join_link(self, unit_env):
        """The response carries a frontend link built from the code."""
        create = await unit_env.get(CreateInvitationUseCase)
        staff = await make_staffed_team(unit_env)

        response = await create.execute(
            CreateInvitationRequest(caller=staff.manager, email="dave@example.com")
        )

        assert response.invitation_url.endswith(f"/join/{response.code}")
        assert response.email == "dave@example.com"
        assert response.role == Role.MEMBER

    @pytest.mark.asyncio
    async def test_member_cannot_create_invitations(self, unit_env):
        """Only ADMIN and MANAGER may invite."""
        create = await unit_env.get(CreateInvitationUseCase)
        staff = await make_staffed_team(unit_env)

        with pytest.raises(NotAuthorizedError):
            await create.execute(CreateInvitationRequest(caller=staff.member))

    @pytest.mark.asyncio
    async def test_full_flow(self, unit_env):
        """A user from another team validates, then uses, an invitation."""
        # Arrange
        create = await unit_env.get(CreateInvitationUseCase)
        validate = await unit_env.get(ValidateInvitationUseCase)
        use = await unit_env.get(UseInvitationUseCase)
        list_invitations = await unit_env.get(ListInvitationsUseCase)
        staff = await make_staffed_team(unit_env)
        dave = await make_user(unit_env, "dave")
        created = await create.execute(
            CreateInvitationRequest(caller=staff.admin, role=Role.MANAGER)
        )

        # Act
        validated = await validate.execute(ValidateInvitationRequest(code=created.code))
        joined = await use.execute(UseInvitationRequest(caller=dave, code=created.code))

        # Assert
        assert validated.team_name == staff.team.name
        assert validated.role == Role.MANAGER
        assert joined.user.team_id == staff.team.id
        assert joined.user.role == Role.MANAGER
        assert joined.team.id == staff.team.id

        listed = await list_invitations.execute(
            ListInvitationsRequest(caller=staff.admin)
        )
        assert listed.invitations[0].state == InvitationState.USED
        assert listed.invitations[0].used_by.id == dave.id
        assert listed.invitations[0].created_by.id == staff.admin.id

    @pytest.mark.asyncio
    async def test_malformed_code_is_not_found(self, unit_env):
        """Codes that cannot exist fail like unknown codes."""
        use = await unit_env.get(UseInvitationUseCase)
        dave = await make_user(unit_env, "dave")

        with pytest.raises(NotFoundError):
            await use.execute(UseInvitationRequest(caller=dave, code="not hex!"))
