"""Use case for creating applications."""

import structlog

from provisioner.application.project.commands import CreateApplicationCommand
from provisioner.application.project.protocols.application_repository import (
    ApplicationRepositoryProtocol,
)
from provisioner.domain.common.value_objects import EnvironmentId
from provisioner.domain.project.entities.application import Application

logger = structlog.get_logger(__name__)


class CreateApplicationUseCase:
    def __init__(self, application_repository: ApplicationRepositoryProtocol) -> None:
        self.application_repository = application_repository

    def create(self, command: CreateApplicationCommand) -> Application:
        """Validate the command and persist a new application."""
        application = Application.create(
            environment_id=EnvironmentId.parse(command.environment_id, field="environment_id"),
            name=command.name,
            description=command.description,
        )

        application = self.application_repository.save(application)

        logger.info(
            "created_application",
            application_id=str(application.id),
            environment_id=str(application.environment_id),
        )
        return application
