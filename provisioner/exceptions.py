"""Custom exception hierarchy for the provisioner.

Validation failures live in the domain layer
(``provisioner.domain.common.exceptions.ValidationError``); the errors here
are raised by adapters behind the provider and persistence ports and are
surfaced unchanged by the use cases.
"""

from starlette import status


class ProvisionerError(Exception):
    """Base exception for all provisioner errors."""

    def __init__(
        self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    ) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ProviderError(ProvisionerError):
    """Source-control provider failure."""


class RateLimitExceededError(ProviderError):
    """The provider signaled throttling and the retry budget is spent."""

    def __init__(
        self, message: str = "Provider rate limit exceeded", *, reset_at: int | None = None
    ) -> None:
        """Initialize with the provider's reset epoch, when known."""
        self.reset_at = reset_at
        super().__init__(message, status_code=status.HTTP_429_TOO_MANY_REQUESTS)


class ProviderTransientError(ProviderError):
    """Retryable provider or transport failure that outlived the retry budget."""

    def __init__(
        self, message: str, *, upstream_status: int | None = None, attempts: int = 1
    ) -> None:
        """Initialize with the last observed upstream status and the attempt count."""
        self.upstream_status = upstream_status
        self.attempts = attempts
        super().__init__(message, status_code=status.HTTP_502_BAD_GATEWAY)


class ProviderMalformedError(ProviderError):
    """The provider answered successfully with a body we cannot read."""

    def __init__(self, message: str) -> None:
        """Initialize with a description of the malformed response."""
        super().__init__(message, status_code=status.HTTP_502_BAD_GATEWAY)


class PersistenceError(ProvisionerError):
    """Relational store failure."""


class PersistenceConflictError(PersistenceError):
    """A uniqueness constraint rejected the write."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 409 status code."""
        super().__init__(message, status_code=status.HTTP_409_CONFLICT)


class PersistenceReferenceError(PersistenceError):
    """A foreign key rejected the write: the parent entity does not exist."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class PersistenceUnavailableError(PersistenceError):
    """The store could not be reached or the connection failed mid-write."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 503 status code."""
        super().__init__(message, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)


class PersistenceRejectedError(PersistenceError):
    """The store refused the write for a reason outside the other categories.

    Typically a value the column cannot hold, such as an oversized string.
    """

    def __init__(self, message: str) -> None:
        """Initialize with message and 500 status code."""
        super().__init__(message)
