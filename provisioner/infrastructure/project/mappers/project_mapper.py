"""Mapper for Project ORM ↔ Domain conversion."""

from provisioner.domain.common.value_objects import ProjectId, UserId
from provisioner.domain.project.entities.project import Project
from provisioner.models import Project as ProjectORM


class ProjectMapper:
    """Mapper for Project ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ProjectORM) -> Project:
        """Convert ORM model to domain entity."""
        return Project.create_with_id(
            id=ProjectId(orm_model.id),
            owner_id=UserId(orm_model.owner_id),
            name=orm_model.name,
            description=orm_model.description,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Project) -> ProjectORM:
        """Convert an unsaved domain entity to a new ORM model."""
        return ProjectORM(
            owner_id=domain_entity.owner_id.value,
            name=domain_entity.name,
            description=domain_entity.description,
        )
