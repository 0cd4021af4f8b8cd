"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status

from provisioner.config import configure_logging, get_settings
from provisioner.core import container
from provisioner.domain.common.exceptions import DomainError
from provisioner.exceptions import ProvisionerError
from provisioner.infrastructure.project.routers import (
    applications_router,
    environments_router,
    projects_router,
)
from provisioner.infrastructure.scm.routers import repositories_router

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging on startup; release the HTTP client and engine on shutdown."""
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
    logger.info(f"Starting {settings.PROJECT_NAME} {settings.VERSION} ({settings.ENVIRONMENT})")
    yield
    container.shutdown_resources()
    logger.info(f"Stopped {settings.PROJECT_NAME}")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Provision projects, environments, applications and their GitHub repositories",
    lifespan=lifespan,
)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Invalid input is a client error."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message},
    )


@app.exception_handler(ProvisionerError)
async def provisioner_error_handler(request: Request, exc: ProvisionerError) -> JSONResponse:
    """Provider and persistence errors carry their own status code."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
    )


app.include_router(projects_router, prefix=settings.API_V1_PREFIX)
app.include_router(environments_router, prefix=settings.API_V1_PREFIX)
app.include_router(applications_router, prefix=settings.API_V1_PREFIX)
app.include_router(repositories_router, prefix=settings.API_V1_PREFIX)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get(f"{settings.API_V1_PREFIX}/")
async def api_root() -> dict[str, str]:
    """API v1 root endpoint."""
    return {
        "message": f"{settings.PROJECT_NAME} API v1",
        "version": settings.VERSION,
        "docs": "/docs",
    }
