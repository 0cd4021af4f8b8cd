import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from provisioner.application.project.commands import CreateApplicationCommand
from provisioner.application.project.use_cases import CreateApplicationUseCase
from provisioner.core import container
from provisioner.domain.common.exceptions import DomainError
from provisioner.exceptions import ProvisionerError
from provisioner.infrastructure.common.di import inject_use_case
from provisioner.infrastructure.project.schemas import (
    ApplicationCreateRequest,
    ApplicationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applications", tags=["applications"])


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
def create_application(
    request: ApplicationCreateRequest,
    use_case: CreateApplicationUseCase = Depends(
        inject_use_case(container.create_application_use_case)
    ),
) -> ApplicationResponse:
    """Create an application inside an environment."""
    try:
        application = use_case.create(
            CreateApplicationCommand(
                environment_id=request.environment_id,
                name=request.name,
                description=request.description,
            )
        )
        return ApplicationResponse.from_entity(application)
    except (DomainError, ProvisionerError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to create application for environment {request.environment_id}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
