"""Team membership domain service."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

import logfire

from hive.config import TeamSettings
from hive.domain.error import NotFoundError
from hive.domain.model import Team, User
from hive.domain.repository import TeamRepository, UserRepository
from hive.domain.value import ActivityType, EntityType, Role, TeamId

from .activity_service import ActivityService
from .base import Service


@dataclass
class MembershipRepairReport:
    """Outcome of assigning unassigned users to the default team."""

    total_users: int
    users_in_team: int
    users_fixed: int
    team: Team
    members: list[User]


class TeamService(Service):
    """Domain service for teams and membership.

    Membership changes keep `User.team_id` and the team's member list in
    step: the member list is updated first, then the user.
    """

    def __init__(
        self,
        team_repository: TeamRepository,
        user_repository: UserRepository,
        activity_service: ActivityService,
        team_settings: TeamSettings,
    ) -> None:
        """Initialize team service.

        Args:
            team_repository: Team repository
            user_repository: User repository
            activity_service: Activity audit service
            team_settings: Default team configuration
        """
        self.team_repository = team_repository
        self.user_repository = user_repository
        self.activity_service = activity_service
        self.team_settings = team_settings

    async def get_by_id(self, team_id: TeamId) -> Team:
        """Get team by ID.

        Raises:
            NotFoundError: If team not found
        """
        team = await self.team_repository.find_by_id(team_id)
        if not team:
            logfire.warn("Team not found", team_id=str(team_id))
            raise NotFoundError("Team", str(team_id))
        return team

    async def ensure_default_team(self, admin: User) -> Team:
        """Return the default team, creating it with `admin` if absent.

        Args:
            admin: User who becomes admin and first member of a new team

        Returns:
            The default team
        """
        with logfire.span("team_service.ensure_default_team", admin_id=str(admin.id)):
            team = await self.team_repository.find_default()
            if team:
                return team

            candidate = Team(
                id=TeamId(uuid4()),
                name=self.team_settings.default_team_name,
                description=self.team_settings.default_team_description,
                admin_id=admin.id,
                member_ids=[admin.id],
                is_default=True,
                created_at=datetime.now(timezone.utc),
            )
            team = await self.team_repository.create_default(candidate)
            if team.id == candidate.id:
                logfire.info(
                    "Default team created", team_id=str(team.id), admin_id=str(admin.id)
                )
            return team

    async def create_founding_team(self, user: User) -> tuple[User, Team]:
        """Make the very first user ADMIN of a fresh default team.

        Args:
            user: Newly created first user

        Returns:
            Tuple of (updated user, team)
        """
        with logfire.span("team_service.create_founding_team", user_id=str(user.id)):
            team = await self.ensure_default_team(user)
            await self.team_repository.add_member(team.id, user.id)

            role = Role.ADMIN if team.admin_id == user.id else user.role
            updated = await self.user_repository.save(
                user.model_copy(update={"team_id": team.id, "role": role})
            )
            team = await self.get_by_id(team.id)
            logfire.info(
                "Founding user assigned",
                user_id=str(user.id),
                team_id=str(team.id),
                role=role.value,
            )
            return updated, team

    async def assign_default_team(self, user: User) -> User:
        """Add an unassigned user to the default team.

        Creates the default team if it does not exist yet, in which case the
        user becomes its ADMIN. Records a `user_joined` activity.

        Args:
            user: User without a team

        Returns:
            Updated user
        """
        with logfire.span("team_service.assign_default_team", user_id=str(user.id)):
            team = await self.ensure_default_team(user)
            await self.team_repository.add_member(team.id, user.id)

            role = Role.ADMIN if team.admin_id == user.id else user.role
            updated = await self.user_repository.save(
                user.model_copy(update={"team_id": team.id, "role": role})
            )

            await self.activity_service.record(
                type=ActivityType.USER_JOINED,
                description=f"{updated.name} joined the {team.name}",
                actor_id=updated.id,
                team_id=team.id,
                entity_id=updated.id,
                entity_type=EntityType.USER,
            )
            logfire.info(
                "User assigned to default team",
                user_id=str(user.id),
                team_id=str(team.id),
                role=role.value,
            )
            return updated

    async def join_team(self, user: User, team: Team, role: Role) -> User:
        """Move a user into a team with the given role.

        The user is removed from their previous team's member list.

        Args:
            user: User joining
            team: Team to join
            role: Role granted in the new team

        Returns:
            Updated user
        """
        with logfire.span(
            "team_service.join_team",
            user_id=str(user.id),
            team_id=str(team.id),
            role=role.value,
        ):
            if user.team_id is not None and user.team_id != team.id:
                await self.team_repository.remove_member(user.team_id, user.id)
                logfire.info(
                    "User left previous team",
                    user_id=str(user.id),
                    team_id=str(user.team_id),
                )

            await self.team_repository.add_member(team.id, user.id)
            updated = await self.user_repository.save(
                user.model_copy(update={"team_id": team.id, "role": role})
            )

            await self.activity_service.record(
                type=ActivityType.USER_JOINED,
                description=f"{updated.name} joined the team via invitation",
                actor_id=updated.id,
                team_id=team.id,
                entity_id=updated.id,
                entity_type=EntityType.USER,
                metadata={"role": role.value},
            )
            return updated

    async def repair_membership(self, caller: User) -> MembershipRepairReport:
        """Assign every unassigned user to the default team.

        Safe to run repeatedly: membership inserts are idempotent.

        Args:
            caller: Admin running the repair (admin of the default team if it
                has to be created)

        Returns:
            Repair report
        """
        with logfire.span("team_service.repair_membership", caller_id=str(caller.id)):
            total = await self.user_repository.count()
            unassigned = await self.user_repository.find_without_team()
            team = await self.ensure_default_team(caller)

            for user in unassigned:
                await self.team_repository.add_member(team.id, user.id)
                await self.user_repository.save(
                    user.model_copy(update={"team_id": team.id})
                )
                logfire.info(
                    "User membership repaired",
                    user_id=str(user.id),
                    team_id=str(team.id),
                )

            members = await self.user_repository.find_by_team(team.id)
            team = await self.get_by_id(team.id)
            logfire.info(
                "Membership repair complete",
                total_users=total,
                users_fixed=len(unassigned),
                users_in_team=len(members),
            )
            return MembershipRepairReport(
                total_users=total,
                users_in_team=len(members),
                users_fixed=len(unassigned),
                team=team,
                members=members,
            )
