"""Creation commands for the project context."""

from dataclasses import dataclass
from uuid import UUID

from provisioner.application.common.command import Command
from provisioner.domain.project.entities.environment import EnvironmentMode


@dataclass(frozen=True)
class CreateProjectCommand(Command):
    owner_id: UUID | str
    name: str
    description: str | None = None


@dataclass(frozen=True)
class CreateEnvironmentCommand(Command):
    project_id: UUID | str
    name: str
    mode: EnvironmentMode | str = EnvironmentMode.DEVELOPMENT
    description: str | None = None


@dataclass(frozen=True)
class CreateApplicationCommand(Command):
    environment_id: UUID | str
    name: str
    description: str | None = None
