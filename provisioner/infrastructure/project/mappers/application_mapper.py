"""Mapper for Application ORM ↔ Domain conversion."""

from provisioner.domain.common.value_objects import ApplicationId, EnvironmentId
from provisioner.domain.project.entities.application import Application
from provisioner.models import Application as ApplicationORM


class ApplicationMapper:
    def to_domain(self, orm_model: ApplicationORM) -> Application:
        return Application.create_with_id(
            id=ApplicationId(orm_model.id),
            environment_id=EnvironmentId(orm_model.environment_id),
            name=orm_model.name,
            description=orm_model.description,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Application) -> ApplicationORM:
        return ApplicationORM(
            environment_id=domain_entity.environment_id.value,
            name=domain_entity.name,
            description=domain_entity.description,
        )
