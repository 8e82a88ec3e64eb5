"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from hive.domain.model.project import Project
from hive.domain.value import ProjectId, TeamId


class ProjectRepository(ABC):
    """Repository for Project entity."""

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID regardless of team."""
        pass

    @abstractmethod
    async def find_in_team(
        self, project_id: ProjectId, team_id: TeamId
    ) -> Optional[Project]:
        """Find a project only if it belongs to the given team.

        Args:
            project_id: Project ID
            team_id: Caller's team

        Returns:
            The project if found in the team, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_team(self, team_id: TeamId) -> List[Project]:
        """Find all projects of a team, newest first."""
        pass

    @abstractmethod
    async def find_many(self, project_ids: List[ProjectId]) -> List[Project]:
        """Find projects by a list of IDs."""
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Save a project (create or update)."""
        pass

    @abstractmethod
    async def delete(self, project_id: ProjectId) -> None:
        """Delete a project (hard delete)."""
        pass
