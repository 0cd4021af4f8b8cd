from .create_remote_repository_use_case import CreateRemoteRepositoryUseCase
from .get_provider_rate_limit_use_case import GetProviderRateLimitUseCase

__all__ = [
    "CreateRemoteRepositoryUseCase",
    "GetProviderRateLimitUseCase",
]
