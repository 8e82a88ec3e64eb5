"""Domain services."""

from .activity_service import ActivityService
from .base import Service
from .broadcast import Broadcaster
from .identity_service import IdentityService, IdentityVerifier
from .invitation_service import InvitationService
from .message_service import MessageService
from .project_service import ProjectService
from .task_service import TaskService, TaskStats
from .team_service import MembershipRepairReport, TeamService
from .user_service import UserService

__all__ = [
    "ActivityService",
    "Broadcaster",
    "IdentityService",
    "IdentityVerifier",
    "InvitationService",
    "MembershipRepairReport",
    "MessageService",
    "ProjectService",
    "Service",
    "TaskService",
    "TaskStats",
    "TeamService",
    "UserService",
]
