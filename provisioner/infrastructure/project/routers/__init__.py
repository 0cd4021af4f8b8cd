from .applications import router as applications_router
from .environments import router as environments_router
from .projects import router as projects_router

__all__ = [
    "applications_router",
    "environments_router",
    "projects_router",
]
