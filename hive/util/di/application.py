"""Application layer DI providers."""

from dishka import Scope, provide

from hive.application.usecase.activity import (
    GetTeamActivitiesUseCase,
    GetUserActivitiesUseCase,
)
from hive.application.usecase.auth import GetCurrentUserUseCase, RegisterUseCase
from hive.application.usecase.invitation import (
    CreateInvitationUseCase,
    DeleteInvitationUseCase,
    ListInvitationsUseCase,
    UseInvitationUseCase,
    ValidateInvitationUseCase,
)
from hive.application.usecase.message import GetMessagesUseCase, SendMessageUseCase
from hive.application.usecase.project import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
)
from hive.application.usecase.task import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskStatsUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from hive.application.usecase.user import (
    GetTeamUsersUseCase,
    RepairTeamMembershipUseCase,
    UpdateUserRoleUseCase,
)
from hive.config import AuthSettings, Settings
from hive.domain.repository import Transaction
from hive.domain.service import (
    ActivityService,
    Broadcaster,
    IdentityService,
    InvitationService,
    MessageService,
    ProjectService,
    TaskService,
    TeamService,
    UserService,
)
from hive.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use cases are REQUEST-scoped to align with domain service lifecycle.
    """

    scope = Scope.REQUEST

    # Auth

    @provide
    def get_current_user_use_case(
        self,
        identity_service: IdentityService,
        user_service: UserService,
        team_service: TeamService,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            identity_service=identity_service,
            user_service=user_service,
            team_service=team_service,
        )

    @provide
    def get_register_use_case(
        self,
        identity_service: IdentityService,
        user_service: UserService,
        team_service: TeamService,
        auth_settings: AuthSettings,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            identity_service=identity_service,
            user_service=user_service,
            team_service=team_service,
            auth_settings=auth_settings,
        )

    # Projects

    @provide
    def get_list_projects_use_case(
        self, project_service: ProjectService
    ) -> ListProjectsUseCase:
        """Provide list projects use case."""
        return ListProjectsUseCase(project_service=project_service)

    @provide
    def get_get_project_use_case(
        self, project_service: ProjectService
    ) -> GetProjectUseCase:
        """Provide get project use case."""
        return GetProjectUseCase(project_service=project_service)

    @provide
    def get_create_project_use_case(
        self, project_service: ProjectService
    ) -> CreateProjectUseCase:
        """Provide create project use case."""
        return CreateProjectUseCase(project_service=project_service)

    @provide
    def get_update_project_use_case(
        self,
        project_service: ProjectService,
        transaction: Transaction,
        broadcaster: Broadcaster,
    ) -> UpdateProjectUseCase:
        """Provide update project use case."""
        return UpdateProjectUseCase(
            project_service=project_service,
            transaction=transaction,
            broadcaster=broadcaster,
        )

    @provide
    def get_delete_project_use_case(
        self, project_service: ProjectService
    ) -> DeleteProjectUseCase:
        """Provide delete project use case."""
        return DeleteProjectUseCase(project_service=project_service)

    # Tasks

    @provide
    def get_list_tasks_use_case(
        self,
        task_service: TaskService,
        project_service: ProjectService,
        user_service: UserService,
    ) -> ListTasksUseCase:
        """Provide list tasks use case."""
        return ListTasksUseCase(
            task_service=task_service,
            project_service=project_service,
            user_service=user_service,
        )

    @provide
    def get_get_task_use_case(
        self, task_service: TaskService, user_service: UserService
    ) -> GetTaskUseCase:
        """Provide get task use case."""
        return GetTaskUseCase(task_service=task_service, user_service=user_service)

    @provide
    def get_create_task_use_case(
        self, task_service: TaskService, user_service: UserService
    ) -> CreateTaskUseCase:
        """Provide create task use case."""
        return CreateTaskUseCase(task_service=task_service, user_service=user_service)

    @provide
    def get_update_task_use_case(
        self,
        task_service: TaskService,
        user_service: UserService,
        transaction: Transaction,
        broadcaster: Broadcaster,
    ) -> UpdateTaskUseCase:
        """Provide update task use case."""
        return UpdateTaskUseCase(
            task_service=task_service,
            user_service=user_service,
            transaction=transaction,
            broadcaster=broadcaster,
        )

    @provide
    def get_delete_task_use_case(self, task_service: TaskService) -> DeleteTaskUseCase:
        """Provide delete task use case."""
        return DeleteTaskUseCase(task_service=task_service)

    @provide
    def get_task_stats_use_case(
        self, task_service: TaskService
    ) -> GetTaskStatsUseCase:
        """Provide task statistics use case."""
        return GetTaskStatsUseCase(task_service=task_service)

    # Messages

    @provide
    def get_get_messages_use_case(
        self, message_service: MessageService, user_service: UserService
    ) -> GetMessagesUseCase:
        """Provide get messages use case."""
        return GetMessagesUseCase(
            message_service=message_service, user_service=user_service
        )

    @provide
    def get_send_message_use_case(
        self,
        message_service: MessageService,
        transaction: Transaction,
        broadcaster: Broadcaster,
    ) -> SendMessageUseCase:
        """Provide send message use case."""
        return SendMessageUseCase(
            message_service=message_service,
            transaction=transaction,
            broadcaster=broadcaster,
        )

    # Users

    @provide
    def get_team_users_use_case(
        self, user_service: UserService
    ) -> GetTeamUsersUseCase:
        """Provide team users use case."""
        return GetTeamUsersUseCase(user_service=user_service)

    @provide
    def get_update_user_role_use_case(
        self, user_service: UserService
    ) -> UpdateUserRoleUseCase:
        """Provide update user role use case."""
        return UpdateUserRoleUseCase(user_service=user_service)

    @provide
    def get_repair_team_membership_use_case(
        self, team_service: TeamService
    ) -> RepairTeamMembershipUseCase:
        """Provide membership repair use case."""
        return RepairTeamMembershipUseCase(team_service=team_service)

    # Activities

    @provide
    def get_team_activities_use_case(
        self, activity_service: ActivityService, user_service: UserService
    ) -> GetTeamActivitiesUseCase:
        """Provide team activity feed use case."""
        return GetTeamActivitiesUseCase(
            activity_service=activity_service, user_service=user_service
        )

    @provide
    def get_user_activities_use_case(
        self, activity_service: ActivityService, user_service: UserService
    ) -> GetUserActivitiesUseCase:
        """Provide user activity feed use case."""
        return GetUserActivitiesUseCase(
            activity_service=activity_service, user_service=user_service
        )

    # Invitations

    @provide
    def get_create_invitation_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> CreateInvitationUseCase:
        """Provide create invitation use case."""
        return CreateInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide
    def get_list_invitations_use_case(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(
            invitation_service=invitation_service, user_service=user_service
        )

    @provide
    def get_validate_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> ValidateInvitationUseCase:
        """Provide validate invitation use case."""
        return ValidateInvitationUseCase(invitation_service=invitation_service)

    @provide
    def get_use_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> UseInvitationUseCase:
        """Provide use invitation use case."""
        return UseInvitationUseCase(invitation_service=invitation_service)

    @provide
    def get_delete_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> DeleteInvitationUseCase:
        """Provide delete invitation use case."""
        return DeleteInvitationUseCase(invitation_service=invitation_service)
