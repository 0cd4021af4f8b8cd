"""Creation commands for the source-control context."""

from dataclasses import dataclass
from uuid import UUID

from provisioner.application.common.command import Command


@dataclass(frozen=True)
class CreateRemoteRepositoryCommand(Command):
    """Create a repository at the provider and record it for an application."""

    application_id: UUID | str
    name: str
    private: bool = False
