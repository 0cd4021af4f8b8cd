from .project_schemas import (
    ApplicationCreateRequest,
    ApplicationResponse,
    EnvironmentCreateRequest,
    EnvironmentResponse,
    ProjectCreateRequest,
    ProjectResponse,
)

__all__ = [
    "ApplicationCreateRequest",
    "ApplicationResponse",
    "EnvironmentCreateRequest",
    "EnvironmentResponse",
    "ProjectCreateRequest",
    "ProjectResponse",
]
