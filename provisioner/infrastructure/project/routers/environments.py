import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from provisioner.application.project.commands import CreateEnvironmentCommand
from provisioner.application.project.use_cases import CreateEnvironmentUseCase
from provisioner.core import container
from provisioner.domain.common.exceptions import DomainError
from provisioner.exceptions import ProvisionerError
from provisioner.infrastructure.common.di import inject_use_case
from provisioner.infrastructure.project.schemas import (
    EnvironmentCreateRequest,
    EnvironmentResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/environments", tags=["environments"])


@router.post("", response_model=EnvironmentResponse, status_code=status.HTTP_201_CREATED)
def create_environment(
    request: EnvironmentCreateRequest,
    use_case: CreateEnvironmentUseCase = Depends(
        inject_use_case(container.create_environment_use_case)
    ),
) -> EnvironmentResponse:
    """
    Create an environment inside a project.

    The mode defaults to development. An unknown project id is reported
    as 404 by the persistence layer.
    """
    try:
        environment = use_case.create(
            CreateEnvironmentCommand(
                project_id=request.project_id,
                name=request.name,
                mode=request.mode,
                description=request.description,
            )
        )
        return EnvironmentResponse.from_entity(environment)
    except (DomainError, ProvisionerError):
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(
            f"Failed to create environment for project {request.project_id}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
