"""PostgreSQL repository implementations."""

from hive.persistence.repository.activity import PostgresActivityRepository
from hive.persistence.repository.invitation import PostgresInvitationRepository
from hive.persistence.repository.message import PostgresMessageRepository
from hive.persistence.repository.project import PostgresProjectRepository
from hive.persistence.repository.task import PostgresTaskRepository
from hive.persistence.repository.team import PostgresTeamRepository
from hive.persistence.repository.transaction import PostgresTransaction
from hive.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresTeamRepository",
    "PostgresProjectRepository",
    "PostgresTaskRepository",
    "PostgresMessageRepository",
    "PostgresInvitationRepository",
    "PostgresActivityRepository",
    "PostgresTransaction",
]
