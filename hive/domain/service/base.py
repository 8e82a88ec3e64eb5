"""Base class for domain services."""

from hive.domain.error import NotFoundError
from hive.domain.model import User
from hive.domain.value import TeamId


class Service:
    """Base class for all domain services.

    Every service works inside a single team. Callers without a team own no
    data, so team-scoped lookups on their behalf report "not found".
    """

    @staticmethod
    def team_of(user: User) -> TeamId:
        """Return the user's team.

        Raises:
            NotFoundError: If the user has not been assigned to a team
        """
        if user.team_id is None:
            raise NotFoundError("Team", str(user.id))
        return user.team_id
