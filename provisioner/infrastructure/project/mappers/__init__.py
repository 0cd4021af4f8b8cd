from .application_mapper import ApplicationMapper
from .environment_mapper import EnvironmentMapper
from .project_mapper import ProjectMapper

__all__ = [
    "ApplicationMapper",
    "EnvironmentMapper",
    "ProjectMapper",
]
