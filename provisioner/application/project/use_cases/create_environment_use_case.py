"""Use case for creating environments."""

import structlog

from provisioner.application.project.commands import CreateEnvironmentCommand
from provisioner.application.project.protocols.environment_repository import (
    EnvironmentRepositoryProtocol,
)
from provisioner.domain.common.value_objects import ProjectId
from provisioner.domain.project.entities.environment import Environment, EnvironmentMode

logger = structlog.get_logger(__name__)


class CreateEnvironmentUseCase:
    """Use case for creating environments inside a project."""

    def __init__(self, environment_repository: EnvironmentRepositoryProtocol) -> None:
        self.environment_repository = environment_repository

    def create(self, command: CreateEnvironmentCommand) -> Environment:
        """
        Create a new environment.

        The parent project is not looked up here; a missing project surfaces
        as PersistenceReferenceError from the repository.

        Raises:
            ValidationError: If the project id, name or mode is invalid
            PersistenceError: If the environment cannot be stored
        """
        environment = Environment.create(
            project_id=ProjectId.parse(command.project_id, field="project_id"),
            name=command.name,
            mode=EnvironmentMode.parse(command.mode),
            description=command.description,
        )

        environment = self.environment_repository.save(environment)

        logger.info(
            "created_environment",
            environment_id=str(environment.id),
            project_id=str(environment.project_id),
            mode=environment.mode.value,
        )
        return environment
