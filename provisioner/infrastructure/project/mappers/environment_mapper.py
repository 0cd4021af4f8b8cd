"""Mapper for Environment ORM ↔ Domain conversion."""

from provisioner.domain.common.value_objects import EnvironmentId, ProjectId
from provisioner.domain.project.entities.environment import Environment, EnvironmentMode
from provisioner.models import Environment as EnvironmentORM


class EnvironmentMapper:
    """Mapper for Environment ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: EnvironmentORM) -> Environment:
        """Convert ORM model to domain entity."""
        return Environment.create_with_id(
            id=EnvironmentId(orm_model.id),
            project_id=ProjectId(orm_model.project_id),
            name=orm_model.name,
            mode=EnvironmentMode(orm_model.mode),
            description=orm_model.description,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Environment) -> EnvironmentORM:
        """Convert an unsaved domain entity to a new ORM model."""
        return EnvironmentORM(
            project_id=domain_entity.project_id.value,
            name=domain_entity.name,
            mode=domain_entity.mode.value,
            description=domain_entity.description,
        )
