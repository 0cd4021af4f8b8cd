"""Repository for RemoteRepository domain entities."""

from sqlalchemy.orm import Session, sessionmaker

from provisioner.domain.scm.entities.remote_repository import (
    ProvisionedRepository,
    RemoteRepository,
)
from provisioner.infrastructure.common.persistence import translate_persistence_errors
from provisioner.infrastructure.scm.mappers.remote_repository_mapper import (
    RemoteRepositoryMapper,
)


class RemoteRepositoryRepository:
    """Repository for RemoteRepository domain entities."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self.mapper = RemoteRepositoryMapper()

    def save(self, repository: ProvisionedRepository) -> RemoteRepository:
        """
        Record a repository that was just created at the provider.

        Raises:
            PersistenceReferenceError: If the application does not exist
            PersistenceConflictError: If the provider id is already recorded
            PersistenceUnavailableError: If the database cannot be reached
        """
        with self.session_factory() as db, translate_persistence_errors(db, "remote repository"):
            orm_model = self.mapper.to_orm(repository)
            db.add(orm_model)
            db.commit()
            db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)
