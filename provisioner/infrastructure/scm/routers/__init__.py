from .repositories import router as repositories_router

__all__ = ["repositories_router"]
