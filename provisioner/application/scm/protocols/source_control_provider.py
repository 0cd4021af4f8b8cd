"""Protocols for the external source-control provider."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ProviderRepository:
    """Repository details as returned by the provider."""

    provider_id: int
    name: str
    full_name: str
    default_branch: str
    private: bool
    size: int
    ssh_url: str
    url: str
    description: str | None = None


@dataclass(frozen=True)
class RateLimit:
    """Core API rate-limit window reported by the provider."""

    limit: int
    remaining: int
    reset: int
    used: int = 0


class SourceControlProviderProtocol(Protocol):
    """Creates repositories at the source-control provider."""

    def create_repository(self, name: str, private: bool = False) -> ProviderRepository:
        """
        Create a remote repository.

        The provider does not deduplicate: calling this twice with the same
        name is only safe when the caller guarantees unique names.

        Raises:
            RateLimitExceededError: If the provider keeps throttling
            ProviderTransientError: If the call keeps failing
            ProviderMalformedError: If the success response cannot be read
        """
        ...


class RateLimitProviderProtocol(Protocol):
    """Reports the provider's current rate-limit window."""

    def get_rate_limit(self) -> RateLimit: ...
