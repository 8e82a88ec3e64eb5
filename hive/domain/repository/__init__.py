"""Repository interfaces for the Hive domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from hive.domain.repository.activity import ActivityRepository
from hive.domain.repository.invitation import InvitationRepository
from hive.domain.repository.message import MessageRepository
from hive.domain.repository.project import ProjectRepository
from hive.domain.repository.task import TaskRepository
from hive.domain.repository.team import TeamRepository
from hive.domain.repository.transaction import Transaction
from hive.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "TeamRepository",
    "ProjectRepository",
    "TaskRepository",
    "MessageRepository",
    "InvitationRepository",
    "ActivityRepository",
    "Transaction",
]
