from .application import Application
from .environment import Environment, EnvironmentMode
from .project import Project

__all__ = [
    "Application",
    "Environment",
    "EnvironmentMode",
    "Project",
]
