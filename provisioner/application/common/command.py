"""
Command base class.

Commands represent intentions to change the system state.
They are named in imperative form: CreateProject, CreateRemoteRepository, etc.

Example:
    @dataclass(frozen=True)
    class CreateProjectCommand(Command):
        owner_id: str
        name: str
        description: str | None = None

    class CreateProjectUseCase:
        def create(self, command: CreateProjectCommand) -> Project:
            project = Project.create(UserId.parse(command.owner_id), command.name)
            return self.project_repository.save(project)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """
    Base class for Commands.

    Commands are:
    - Immutable (frozen dataclass)
    - Named in imperative form (CreateProject, not ProjectCreation)
    - Carry the raw input needed to execute the operation
    - Represent intentions, not facts

    Commands carry unvalidated values; use cases convert them to domain
    objects, which is where validation happens.
    """
