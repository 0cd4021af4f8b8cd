"""Repository for Environment domain entities."""

from sqlalchemy.orm import Session, sessionmaker

from provisioner.domain.project.entities.environment import Environment
from provisioner.infrastructure.common.persistence import translate_persistence_errors
from provisioner.infrastructure.project.mappers.environment_mapper import EnvironmentMapper


class EnvironmentRepository:
    """Repository for Environment domain entities."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self.mapper = EnvironmentMapper()

    def save(self, environment: Environment) -> Environment:
        """
        Insert a new environment.

        Args:
            environment: The unsaved environment entity

        Returns:
            Saved environment entity with database-generated id and timestamps
        """
        if environment.id is not None:
            raise ValueError(f"Environment {environment.id} is already saved")

        with self.session_factory() as db, translate_persistence_errors(db, "environment"):
            orm_model = self.mapper.to_orm(environment)
            db.add(orm_model)
            db.commit()
            db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)
