"""Shared validation helpers for entity text fields."""

from .exceptions import ValidationError

# Width of the name columns in the relational store
MAX_NAME_LENGTH = 255


def require_name(name: str, field: str = "name", max_length: int = MAX_NAME_LENGTH) -> str:
    """Return the stripped name, rejecting empty, whitespace-only or oversized values."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Name cannot be empty", field=field)
    name = name.strip()
    if len(name) > max_length:
        raise ValidationError(
            f"Name cannot exceed {max_length} characters", field=field, value=name
        )
    return name


def normalize_description(description: str | None) -> str | None:
    """Strip a description, collapsing blank values to None."""
    if description is None:
        return None
    description = description.strip()
    return description or None
