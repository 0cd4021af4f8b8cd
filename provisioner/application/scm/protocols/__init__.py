from .remote_repository_repository import RemoteRepositoryRepositoryProtocol
from .source_control_provider import (
    ProviderRepository,
    RateLimit,
    RateLimitProviderProtocol,
    SourceControlProviderProtocol,
)

__all__ = [
    "ProviderRepository",
    "RateLimit",
    "RateLimitProviderProtocol",
    "RemoteRepositoryRepositoryProtocol",
    "SourceControlProviderProtocol",
]
