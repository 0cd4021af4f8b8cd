"""Protocol for Environment repository."""

from typing import Protocol

from provisioner.domain.project.entities.environment import Environment


class EnvironmentRepositoryProtocol(Protocol):
    """Protocol for Environment persistence."""

    def save(self, environment: Environment) -> Environment:
        """
        Persist a new environment.

        Raises:
            PersistenceReferenceError: If the parent project does not exist
            PersistenceConflictError: On a uniqueness violation
            PersistenceUnavailableError: If the store cannot be reached
        """
        ...
