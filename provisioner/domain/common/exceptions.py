"""Errors raised by the domain model before any port is called."""


class DomainError(Exception):
    """Base for rule violations detected inside the domain model."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """
    Input that cannot become a valid entity.

    For instance an empty name, a malformed identifier, an unknown environment
    mode. ``field`` names the offending input and ``value`` keeps the raw
    value that was rejected.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message
