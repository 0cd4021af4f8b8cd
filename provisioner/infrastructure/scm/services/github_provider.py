"""GitHub REST API adapter for the source-control provider ports."""

import random
import time
from collections.abc import Callable
from typing import Any

import httpx
import structlog
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from provisioner.application.scm.protocols.source_control_provider import (
    ProviderRepository,
    RateLimit,
)
from provisioner.config import GithubConfig
from provisioner.exceptions import (
    ProviderMalformedError,
    ProviderTransientError,
    RateLimitExceededError,
)
from provisioner.infrastructure.scm.services.backoff import BackoffPolicy

logger = structlog.get_logger(__name__)

RATE_LIMIT_STATUSES = (403, 429)


class GithubRepositoryResponse(BaseModel):
    """Repository body returned by ``POST /user/repos`` and ``POST /orgs/{org}/repos``."""

    id: int
    name: str
    full_name: str
    default_branch: str
    private: bool
    size: int = Field(..., ge=0)
    ssh_url: str
    url: str
    description: str | None = None

    def to_provider_repository(self) -> ProviderRepository:
        return ProviderRepository(
            provider_id=self.id,
            name=self.name,
            full_name=self.full_name,
            default_branch=self.default_branch,
            private=self.private,
            size=self.size,
            ssh_url=self.ssh_url,
            url=self.url,
            description=self.description,
        )


class GithubRate(BaseModel):
    limit: int
    remaining: int
    reset: int
    used: int = 0


class GithubRateLimitResponse(BaseModel):
    """Body of ``GET /rate_limit``; only the core ``rate`` window is read."""

    rate: GithubRate


def create_github_client(
    config: GithubConfig, transport: httpx.BaseTransport | None = None
) -> httpx.Client:
    """
    Create the process-wide HTTP client for the GitHub API.

    Args:
        config: GitHub connection settings
        transport: Optional transport override (tests use ``httpx.MockTransport``)
    """
    return httpx.Client(
        base_url=config.api_url,
        headers={
            "User-Agent": config.user_agent,
            "Authorization": f"token {config.token}",
            "Accept": "application/vnd.github+json",
        },
        timeout=httpx.Timeout(config.timeout),
        transport=transport,
    )


class GithubProvider:
    """
    Create repositories and read rate limits through the GitHub REST API.

    Each call runs its own retry loop of at most ``1 + max_retry`` attempts:

    - 2xx: decode the body; an unreadable body raises ProviderMalformedError
      without retrying
    - 403 / 429: rate limited; wait for the longer of the backoff delay and
      the wait the provider asks for, or give up at once if that wait exceeds
      ``rate_limit_max_wait``
    - any other status, or any ``httpx.RequestError``: transient; wait the
      backoff delay

    The request body is built once and sent unchanged on every attempt.
    """

    def __init__(
        self,
        client: httpx.Client,
        config: GithubConfig,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.time,
        rng: Callable[[], float] = random.random,
    ) -> None:
        self.client = client
        self.config = config
        self.sleep = sleep
        self.clock = clock
        self.backoff = BackoffPolicy(
            base=config.backoff_base,
            max_delay=config.backoff_max,
            rng=rng,
        )

    def create_repository(self, name: str, private: bool = False) -> ProviderRepository:
        """
        Create a repository for the configured user or organization.

        Raises:
            RateLimitExceededError: If GitHub keeps throttling the request
            ProviderTransientError: If every attempt fails
            ProviderMalformedError: If the success body cannot be read
        """
        path = self._repositories_path()
        payload = {"name": name, "private": private}
        response = self._send("POST", path, payload)

        try:
            body = GithubRepositoryResponse.model_validate_json(response.content)
        except PydanticValidationError as e:
            logger.error(
                "github_malformed_response",
                path=path,
                status=response.status_code,
                errors=e.error_count(),
            )
            raise ProviderMalformedError(
                f"GitHub returned an unreadable repository body: {e.errors()[0]['msg']}"
            ) from e

        logger.info("github_repository_created", full_name=body.full_name, provider_id=body.id)
        return body.to_provider_repository()

    def get_rate_limit(self) -> RateLimit:
        """Read the core rate-limit window from ``GET /rate_limit``."""
        response = self._send("GET", "/rate_limit")

        try:
            body = GithubRateLimitResponse.model_validate_json(response.content)
        except PydanticValidationError as e:
            logger.error("github_malformed_response", path="/rate_limit")
            raise ProviderMalformedError("GitHub returned an unreadable rate-limit body") from e

        return RateLimit(
            limit=body.rate.limit,
            remaining=body.rate.remaining,
            reset=body.rate.reset,
            used=body.rate.used,
        )

    def _repositories_path(self) -> str:
        if self.config.entity_type == "organization":
            return f"/orgs/{self.config.owner}/repos"
        return "/user/repos"

    def _send(
        self, method: str, path: str, payload: dict[str, Any] | None = None
    ) -> httpx.Response:
        attempts = 1 + self.config.max_retry
        rate_limited = False
        reset_at: int | None = None
        last_status: int | None = None
        last_message = ""

        for attempt in range(1, attempts + 1):
            requested_wait: float | None = None
            try:
                response = self.client.request(method, path, json=payload)
            except httpx.RequestError as e:
                rate_limited = False
                last_status = None
                last_message = str(e) or type(e).__name__
                logger.warning(
                    "github_transport_error",
                    method=method,
                    path=path,
                    attempt=attempt,
                    error=last_message,
                )
            else:
                if response.is_success:
                    return response

                if response.status_code in RATE_LIMIT_STATUSES:
                    rate_limited = True
                    reset_at = self._reset_epoch(response)
                    requested_wait = self._requested_wait(response)
                    logger.warning(
                        "github_rate_limited",
                        method=method,
                        path=path,
                        attempt=attempt,
                        status=response.status_code,
                        requested_wait=requested_wait,
                    )
                    if (
                        requested_wait is not None
                        and requested_wait > self.config.rate_limit_max_wait
                    ):
                        raise RateLimitExceededError(
                            f"GitHub rate limit resets in {requested_wait:.0f}s, "
                            f"longer than the {self.config.rate_limit_max_wait:.0f}s allowed",
                            reset_at=reset_at,
                        )
                else:
                    rate_limited = False
                    last_status = response.status_code
                    last_message = self._error_message(response)
                    logger.warning(
                        "github_request_failed",
                        method=method,
                        path=path,
                        attempt=attempt,
                        status=last_status,
                        error=last_message,
                    )

            if attempt == attempts:
                break

            delay = self.backoff.delay(attempt)
            if requested_wait is not None:
                delay = max(delay, requested_wait)
            logger.info("github_request_retry", path=path, attempt=attempt, delay=delay)
            self.sleep(delay)

        if rate_limited:
            raise RateLimitExceededError(
                f"GitHub rate limit exceeded after {attempts} attempts", reset_at=reset_at
            )
        raise ProviderTransientError(
            f"GitHub request failed after {attempts} attempts: {last_message}",
            upstream_status=last_status,
            attempts=attempts,
        )

    def _requested_wait(self, response: httpx.Response) -> float | None:
        """Seconds GitHub asks us to wait, from Retry-After or the rate-limit reset."""
        retry_after = response.headers.get("Retry-After")
        if retry_after is not None:
            try:
                return max(0.0, float(retry_after))
            except ValueError:
                pass

        if response.headers.get("X-RateLimit-Remaining") == "0":
            reset = self._reset_epoch(response)
            if reset is not None:
                return max(0.0, reset - self.clock())
        return None

    @staticmethod
    def _reset_epoch(response: httpx.Response) -> int | None:
        reset = response.headers.get("X-RateLimit-Reset")
        if reset is None or not reset.isdigit():
            return None
        return int(reset)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        # GitHub error bodies look like {"message": ..., "documentation_url": ...}
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            return body["message"]
        return f"HTTP {response.status_code} {response.reason_phrase}".strip()
