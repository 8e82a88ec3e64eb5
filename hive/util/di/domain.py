"""Domain layer DI providers."""

from dishka import Scope, provide

from hive.config import InvitationSettings, MessageSettings, TeamSettings
from hive.domain.repository import (
    ActivityRepository,
    InvitationRepository,
    MessageRepository,
    ProjectRepository,
    TaskRepository,
    TeamRepository,
    UserRepository,
)
from hive.domain.service import (
    ActivityService,
    IdentityService,
    IdentityVerifier,
    InvitationService,
    MessageService,
    ProjectService,
    TaskService,
    TeamService,
    UserService,
)
from hive.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_identity_service(self, verifier: IdentityVerifier) -> IdentityService:
        """Provide identity verification service."""
        return IdentityService(verifier=verifier)

    @provide
    def get_activity_service(
        self, activity_repository: ActivityRepository
    ) -> ActivityService:
        """Provide activity audit service."""
        return ActivityService(activity_repository=activity_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_team_service(
        self,
        team_repository: TeamRepository,
        user_repository: UserRepository,
        activity_service: ActivityService,
        team_settings: TeamSettings,
    ) -> TeamService:
        """Provide team membership service."""
        return TeamService(
            team_repository=team_repository,
            user_repository=user_repository,
            activity_service=activity_service,
            team_settings=team_settings,
        )

    @provide
    def get_project_service(
        self,
        project_repository: ProjectRepository,
        task_repository: TaskRepository,
        activity_service: ActivityService,
    ) -> ProjectService:
        """Provide project domain service."""
        return ProjectService(
            project_repository=project_repository,
            task_repository=task_repository,
            activity_service=activity_service,
        )

    @provide
    def get_task_service(
        self,
        task_repository: TaskRepository,
        project_repository: ProjectRepository,
        user_repository: UserRepository,
        activity_service: ActivityService,
    ) -> TaskService:
        """Provide task domain service."""
        return TaskService(
            task_repository=task_repository,
            project_repository=project_repository,
            user_repository=user_repository,
            activity_service=activity_service,
        )

    @provide
    def get_message_service(
        self,
        message_repository: MessageRepository,
        activity_service: ActivityService,
        message_settings: MessageSettings,
    ) -> MessageService:
        """Provide chat message service."""
        return MessageService(
            message_repository=message_repository,
            activity_service=activity_service,
            message_settings=message_settings,
        )

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        team_service: TeamService,
        activity_service: ActivityService,
        invitation_settings: InvitationSettings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            team_service=team_service,
            activity_service=activity_service,
            invitation_settings=invitation_settings,
        )
