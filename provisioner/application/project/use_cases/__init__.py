from .create_application_use_case import CreateApplicationUseCase
from .create_environment_use_case import CreateEnvironmentUseCase
from .create_project_use_case import CreateProjectUseCase

__all__ = [
    "CreateApplicationUseCase",
    "CreateEnvironmentUseCase",
    "CreateProjectUseCase",
]
