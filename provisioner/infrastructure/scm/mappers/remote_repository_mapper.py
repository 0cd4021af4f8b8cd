"""Mapper for RemoteRepository ORM ↔ Domain conversion."""

from provisioner.domain.common.value_objects import ApplicationId, RemoteRepositoryId
from provisioner.domain.scm.entities.remote_repository import (
    ProvisionedRepository,
    RemoteRepository,
)
from provisioner.models import GitRepository as GitRepositoryORM


class RemoteRepositoryMapper:
    """Mapper for RemoteRepository ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: GitRepositoryORM) -> RemoteRepository:
        """Convert ORM model to domain entity."""
        provisioned = ProvisionedRepository(
            application_id=ApplicationId(orm_model.application_id),
            provider_id=orm_model.provider_id,
            name=orm_model.name,
            full_name=orm_model.full_name,
            default_branch=orm_model.default_branch,
            private=orm_model.private,
            size=orm_model.size,
            ssh_url=orm_model.ssh_url,
            url=orm_model.url,
            description=orm_model.description,
        )
        return RemoteRepository.create_with_id(
            id=RemoteRepositoryId(orm_model.id),
            provisioned=provisioned,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, provisioned: ProvisionedRepository) -> GitRepositoryORM:
        """Convert a provisioned repository to a new ORM model."""
        return GitRepositoryORM(
            application_id=provisioned.application_id.value,
            provider_id=provisioned.provider_id,
            name=provisioned.name,
            full_name=provisioned.full_name,
            default_branch=provisioned.default_branch,
            private=provisioned.private,
            size=provisioned.size,
            ssh_url=provisioned.ssh_url,
            url=provisioned.url,
            description=provisioned.description,
        )
