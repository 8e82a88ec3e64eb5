"""Integration tests for registration against PostgreSQL."""

import pytest

from hive.adapter.identity import MockIdentityVerifier
from hive.application.usecase.auth import RegisterRequest, RegisterUseCase
from hive.domain.repository import TeamRepository, UserRepository
from hive.domain.value import Role
from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL, mocked identity provider
integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = pytest.mark.usefixtures("clean_database")


async def _register(env, name: str):
    verifier = await env.get(MockIdentityVerifier)
    token = verifier.issue(
        subject=f"uid-{name}", email=f"{name}@example.com", name=name.title()
    )
    register = await env.get(RegisterUseCase)
    return await register.execute(RegisterRequest(token=token))


class TestRegisterIntegration:
    """Registration persists users, the default team and its membership."""

    @pytest.mark.asyncio
    async def test_founder_and_member_share_the_default_team(self, integration_env):
        founder = await _register(integration_env, "alice")
        member = await _register(integration_env, "bob")

        team_repo = await integration_env.get(TeamRepository)
        team = await team_repo.find_default()
        assert team is not None
        assert team.id == founder.team.id
        assert team.member_ids == [founder.user.id, member.user.id]
        assert member.user.role == Role.MEMBER

    @pytest.mark.asyncio
    async def test_registering_twice_keeps_one_user(self, integration_env):
        first = await _register(integration_env, "alice")
        second = await _register(integration_env, "alice")

        user_repo = await integration_env.get(UserRepository)
        assert not second.created
        assert second.user.id == first.user.id
        assert await user_repo.count() == 1
