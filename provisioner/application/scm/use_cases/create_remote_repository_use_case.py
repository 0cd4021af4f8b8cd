"""Use case for provisioning remote repositories."""

import structlog

from provisioner.application.scm.commands import CreateRemoteRepositoryCommand
from provisioner.application.scm.protocols.remote_repository_repository import (
    RemoteRepositoryRepositoryProtocol,
)
from provisioner.application.scm.protocols.source_control_provider import (
    ProviderRepository,
    SourceControlProviderProtocol,
)
from provisioner.domain.common.value_objects import ApplicationId
from provisioner.domain.scm.entities.remote_repository import (
    ProvisionedRepository,
    RemoteRepository,
    validate_repository_name,
)
from provisioner.exceptions import PersistenceError

logger = structlog.get_logger(__name__)


class CreateRemoteRepositoryUseCase:
    """
    Create a repository at the source-control provider and record it locally.

    Every invocation makes exactly one provider call and, only when that
    succeeds, exactly one persistence call. Nothing is cached or
    deduplicated between invocations.
    """

    def __init__(
        self,
        provider: SourceControlProviderProtocol,
        remote_repository_repository: RemoteRepositoryRepositoryProtocol,
    ) -> None:
        self.provider = provider
        self.remote_repository_repository = remote_repository_repository

    def create(self, command: CreateRemoteRepositoryCommand) -> RemoteRepository:
        """
        Provision a remote repository for an application.

        Args:
            command: Application id, repository name and visibility

        Returns:
            The saved remote repository

        Raises:
            ValidationError: If the application id or name is invalid
            ProviderError: If the provider call fails; nothing is persisted
            PersistenceError: If recording fails; the remote repository
                already exists at the provider and is left in place
        """
        application_id = ApplicationId.parse(command.application_id, field="application_id")
        name = validate_repository_name(command.name)

        created = self.provider.create_repository(name, private=command.private)
        provisioned = self._bind_to_application(created, application_id)

        logger.info(
            "remote_repository_provisioned",
            application_id=str(application_id),
            provider_id=provisioned.provider_id,
            full_name=provisioned.full_name,
        )

        try:
            repository = self.remote_repository_repository.save(provisioned)
        except PersistenceError as e:
            logger.error(
                "remote_repository_orphaned",
                application_id=str(application_id),
                provider_id=provisioned.provider_id,
                full_name=provisioned.full_name,
                error=e.message,
            )
            raise

        logger.info(
            "created_remote_repository",
            remote_repository_id=str(repository.id),
            application_id=str(application_id),
            provider_id=repository.provider_id,
        )
        return repository

    @staticmethod
    def _bind_to_application(
        created: ProviderRepository, application_id: ApplicationId
    ) -> ProvisionedRepository:
        return ProvisionedRepository.from_provider(
            application_id=application_id,
            provider_id=created.provider_id,
            name=created.name,
            full_name=created.full_name,
            default_branch=created.default_branch,
            private=created.private,
            size=created.size,
            ssh_url=created.ssh_url,
            url=created.url,
            description=created.description,
        )
