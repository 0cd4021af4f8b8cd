"""Use case for creating projects."""

import structlog

from provisioner.application.project.commands import CreateProjectCommand
from provisioner.application.project.protocols.project_repository import (
    ProjectRepositoryProtocol,
)
from provisioner.domain.common.value_objects import UserId
from provisioner.domain.project.entities.project import Project

logger = structlog.get_logger(__name__)


class CreateProjectUseCase:
    """Use case for creating projects."""

    def __init__(self, project_repository: ProjectRepositoryProtocol) -> None:
        self.project_repository = project_repository

    def create(self, command: CreateProjectCommand) -> Project:
        """
        Create a new project.

        Args:
            command: Owner, name and optional description

        Returns:
            The saved project

        Raises:
            ValidationError: If the owner id is malformed or the name is empty
            PersistenceError: If the project cannot be stored
        """
        project = Project.create(
            owner_id=UserId.parse(command.owner_id, field="owner_id"),
            name=command.name,
            description=command.description,
        )

        project = self.project_repository.save(project)

        logger.info(
            "created_project",
            project_id=str(project.id),
            owner_id=str(project.owner_id),
        )
        return project
