from .remote_repository_schemas import (
    RateLimitResponse,
    RemoteRepositoryCreateRequest,
    RemoteRepositoryResponse,
)

__all__ = [
    "RateLimitResponse",
    "RemoteRepositoryCreateRequest",
    "RemoteRepositoryResponse",
]
