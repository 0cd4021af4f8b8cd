"""Protocol for Project repository."""

from typing import Protocol

from provisioner.domain.project.entities.project import Project


class ProjectRepositoryProtocol(Protocol):
    """Protocol for Project persistence."""

    def save(self, project: Project) -> Project:
        """
        Persist a new project.

        Args:
            project: An unsaved project (id is None)

        Returns:
            The saved project with its id and timestamps assigned

        Raises:
            PersistenceConflictError: On a uniqueness violation
            PersistenceUnavailableError: If the store cannot be reached
        """
        ...
