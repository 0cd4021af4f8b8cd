"""Protocol for RemoteRepository persistence."""

from typing import Protocol

from provisioner.domain.scm.entities.remote_repository import (
    ProvisionedRepository,
    RemoteRepository,
)


class RemoteRepositoryRepositoryProtocol(Protocol):
    """Protocol for recording provisioned repositories."""

    def save(self, repository: ProvisionedRepository) -> RemoteRepository:
        """
        Record a repository that already exists at the provider.

        Args:
            repository: The provisioned repository, bound to its application

        Returns:
            The saved remote repository with its id and timestamps assigned

        Raises:
            PersistenceReferenceError: If the application does not exist
            PersistenceConflictError: If the provider id is already recorded
            PersistenceUnavailableError: If the store cannot be reached
        """
        ...
