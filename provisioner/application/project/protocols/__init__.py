from .application_repository import ApplicationRepositoryProtocol
from .environment_repository import EnvironmentRepositoryProtocol
from .project_repository import ProjectRepositoryProtocol

__all__ = [
    "ApplicationRepositoryProtocol",
    "EnvironmentRepositoryProtocol",
    "ProjectRepositoryProtocol",
]
