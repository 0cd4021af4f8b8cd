"""Repository for Application domain entities."""

from sqlalchemy.orm import Session, sessionmaker

from provisioner.domain.project.entities.application import Application
from provisioner.infrastructure.common.persistence import translate_persistence_errors
from provisioner.infrastructure.project.mappers.application_mapper import ApplicationMapper


class ApplicationRepository:
    """Repository for Application domain entities."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self.mapper = ApplicationMapper()

    def save(self, application: Application) -> Application:
        """
        Insert a new application.

        Args:
            application: The unsaved application entity

        Returns:
            Saved application entity with database-generated id and timestamps
        """
        if application.id is not None:
            raise ValueError(f"Application {application.id} is already saved")

        with self.session_factory() as db, translate_persistence_errors(db, "application"):
            orm_model = self.mapper.to_orm(application)
            db.add(orm_model)
            db.commit()
            db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)
