from .application_repository import ApplicationRepository
from .environment_repository import EnvironmentRepository
from .project_repository import ProjectRepository

__all__ = [
    "ApplicationRepository",
    "EnvironmentRepository",
    "ProjectRepository",
]
