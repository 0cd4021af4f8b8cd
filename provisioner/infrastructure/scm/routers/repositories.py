import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from provisioner.application.scm.commands import CreateRemoteRepositoryCommand
from provisioner.application.scm.use_cases import (
    CreateRemoteRepositoryUseCase,
    GetProviderRateLimitUseCase,
)
from provisioner.core import container
from provisioner.domain.common.exceptions import DomainError
from provisioner.exceptions import ProvisionerError
from provisioner.infrastructure.common.di import inject_use_case
from provisioner.infrastructure.scm.schemas import (
    RateLimitResponse,
    RemoteRepositoryCreateRequest,
    RemoteRepositoryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/repositories", tags=["repositories"])


@router.post("", response_model=RemoteRepositoryResponse, status_code=status.HTTP_201_CREATED)
def create_repository(
    request: RemoteRepositoryCreateRequest,
    use_case: CreateRemoteRepositoryUseCase = Depends(
        inject_use_case(container.create_remote_repository_use_case)
    ),
) -> RemoteRepositoryResponse:
    """
    Create a repository at GitHub and record it for an application.

    The GitHub call happens first. If it fails nothing is recorded. If
    recording fails afterwards the repository stays at GitHub and the
    error is returned unchanged.

    Args:
        request: Application id, repository name and visibility
        use_case: CreateRemoteRepositoryUseCase injected via dependency container

    Returns:
        The recorded repository

    Raises:
        HTTPException: 400 on invalid input, 429 when GitHub throttles,
            502 when GitHub fails, 404/409/503 when recording fails
    """
    try:
        repository = use_case.create(
            CreateRemoteRepositoryCommand(
                application_id=request.application_id,
                name=request.name,
                private=request.private,
            )
        )
        return RemoteRepositoryResponse.from_entity(repository)
    except (DomainError, ProvisionerError):
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(
            f"Failed to create repository for application {request.application_id}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/rate-limit", response_model=RateLimitResponse, status_code=status.HTTP_200_OK)
def get_rate_limit(
    use_case: GetProviderRateLimitUseCase = Depends(
        inject_use_case(container.get_provider_rate_limit_use_case)
    ),
) -> RateLimitResponse:
    """Report GitHub's current core rate-limit window."""
    try:
        return RateLimitResponse.from_rate_limit(use_case.get_rate_limit())
    except ProvisionerError:
        raise
    except Exception as e:
        logger.error(f"Failed to read GitHub rate limit: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
