"""Repository for Project domain entities."""

from sqlalchemy.orm import Session, sessionmaker

from provisioner.domain.project.entities.project import Project
from provisioner.infrastructure.common.persistence import translate_persistence_errors
from provisioner.infrastructure.project.mappers.project_mapper import ProjectMapper


class ProjectRepository:
    """Repository for Project domain entities."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self.mapper = ProjectMapper()

    def save(self, project: Project) -> Project:
        """
        Insert a new project.

        Args:
            project: The unsaved project entity

        Returns:
            Saved project entity with database-generated id and timestamps
        """
        if project.id is not None:
            raise ValueError(f"Project {project.id} is already saved")

        with self.session_factory() as db, translate_persistence_errors(db, "project"):
            orm_model = self.mapper.to_orm(project)
            db.add(orm_model)
            db.commit()
            db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)
