"""Use case for inspecting the provider's rate-limit window."""

import structlog

from provisioner.application.scm.protocols.source_control_provider import (
    RateLimit,
    RateLimitProviderProtocol,
)

logger = structlog.get_logger(__name__)


class GetProviderRateLimitUseCase:
    def __init__(self, provider: RateLimitProviderProtocol) -> None:
        self.provider = provider

    def get_rate_limit(self) -> RateLimit:
        """Return the provider's current core rate-limit window."""
        rate_limit = self.provider.get_rate_limit()
        logger.debug(
            "fetched_provider_rate_limit",
            remaining=rate_limit.remaining,
            limit=rate_limit.limit,
            reset=rate_limit.reset,
        )
        return rate_limit
