from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True, order=True)
class UserId(EntityId):
    """Strongly-typed identifier of the user owning a project."""


@dataclass(frozen=True, order=True)
class ProjectId(EntityId):
    """Strongly-typed project identifier."""


@dataclass(frozen=True, order=True)
class EnvironmentId(EntityId):
    """Strongly-typed environment identifier."""


@dataclass(frozen=True, order=True)
class ApplicationId(EntityId):
    """Strongly-typed application identifier."""


@dataclass(frozen=True, order=True)
class RemoteRepositoryId(EntityId):
    """Strongly-typed identifier of a locally recorded remote repository."""
