"""Mock persistence providers for testing."""

from dishka import Scope, provide

from hive.domain.repository import (
    ActivityRepository,
    InvitationRepository,
    MessageRepository,
    ProjectRepository,
    TaskRepository,
    TeamRepository,
    Transaction,
    UserRepository,
)
from hive.persistence.repository.inmemory import (
    InMemoryActivityRepository,
    InMemoryInvitationRepository,
    InMemoryMessageRepository,
    InMemoryProjectRepository,
    InMemoryStore,
    InMemoryTaskRepository,
    InMemoryTeamRepository,
    InMemoryTransaction,
    InMemoryUserRepository,
)
from hive.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so that data written in one request is visible
    to the next; each container (and so each test) gets a fresh store.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_transaction(self) -> Transaction:
        """Provide a transaction whose commit has nothing to flush."""
        return InMemoryTransaction()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_team_repository(self, store: InMemoryStore) -> TeamRepository:
        """Provide in-memory team repository."""
        return InMemoryTeamRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_project_repository(self, store: InMemoryStore) -> ProjectRepository:
        """Provide in-memory project repository."""
        return InMemoryProjectRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_task_repository(self, store: InMemoryStore) -> TaskRepository:
        """Provide in-memory task repository."""
        return InMemoryTaskRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, store: InMemoryStore) -> MessageRepository:
        """Provide in-memory message repository."""
        return InMemoryMessageRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(
        self, store: InMemoryStore
    ) -> InvitationRepository:
        """Provide in-memory invitation repository."""
        return InMemoryInvitationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_activity_repository(self, store: InMemoryStore) -> ActivityRepository:
        """Provide in-memory activity repository."""
        return InMemoryActivityRepository(store)
