"""Common value objects shared across all domain modules."""

from .ids import ApplicationId, EnvironmentId, ProjectId, RemoteRepositoryId, UserId

__all__ = [
    "ApplicationId",
    "EnvironmentId",
    "ProjectId",
    "RemoteRepositoryId",
    "UserId",
]
