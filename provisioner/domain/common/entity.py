"""
Identity primitives shared by every aggregate.

An aggregate is built without an id, and the persistence port that stores
it hands back a copy carrying the database-assigned identifier.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID

from .exceptions import ValidationError


@dataclass(frozen=True, order=True)
class EntityId:
    """
    A UUID tagged with the kind of thing it identifies.

    Subclasses are distinct types, so a ProjectId never compares equal to an
    EnvironmentId wrapping the same UUID.
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{self.__class__.__name__} must wrap a UUID")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, raw: "UUID | str | EntityId", field: str | None = None) -> Self:
        """
        Build an identifier from a UUID or its string form.

        Raises:
            ValidationError: If the value is not a well-formed UUID
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, UUID):
            return cls(raw)
        if isinstance(raw, str):
            try:
                return cls(UUID(raw.strip()))
            except ValueError:
                pass
        raise ValidationError(
            f"Invalid {cls.__name__}: {raw!r} is not a valid UUID",
            field=field,
            value=raw,
        )

    def to_primitive(self) -> str:
        """Canonical string form used on the wire."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """Something with an identity; ``id`` stays None until the entity is saved."""

    id: IdType | None

    @property
    def is_saved(self) -> bool:
        """Whether the persistence layer has assigned an identity."""
        return self.id is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
