import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from provisioner.application.project.commands import CreateProjectCommand
from provisioner.application.project.use_cases import CreateProjectUseCase
from provisioner.core import container
from provisioner.domain.common.exceptions import DomainError
from provisioner.exceptions import ProvisionerError
from provisioner.infrastructure.common.di import inject_use_case
from provisioner.infrastructure.project.schemas import ProjectCreateRequest, ProjectResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    request: ProjectCreateRequest,
    use_case: CreateProjectUseCase = Depends(inject_use_case(container.create_project_use_case)),
) -> ProjectResponse:
    """
    Create a project for a user.

    Args:
        request: Owner id, name and optional description
        use_case: CreateProjectUseCase injected via dependency container

    Returns:
        Created project with its id and timestamps

    Raises:
        HTTPException: If validation fails or the project cannot be saved
    """
    try:
        project = use_case.create(
            CreateProjectCommand(
                owner_id=request.owner_id,
                name=request.name,
                description=request.description,
            )
        )
        return ProjectResponse.from_entity(project)
    except (DomainError, ProvisionerError):
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to create project: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
