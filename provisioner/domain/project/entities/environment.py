"""Environment entity."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from provisioner.domain.common.entity import Entity
from provisioner.domain.common.exceptions import ValidationError
from provisioner.domain.common.validation import normalize_description, require_name
from provisioner.domain.common.value_objects import EnvironmentId, ProjectId


class EnvironmentMode(StrEnum):
    """Deployment stage an environment represents."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, raw: "str | EnvironmentMode") -> "EnvironmentMode":
        """Parse a mode name case-insensitively."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.strip().lower())
            except ValueError:
                pass
        allowed = ", ".join(mode.value for mode in cls)
        raise ValidationError(
            f"Invalid environment mode {raw!r}, expected one of: {allowed}",
            field="mode",
            value=raw,
        )


@dataclass
class Environment(Entity[EnvironmentId]):
    """
    Environment inside a project.

    Business Rules:
    - Name cannot be empty
    - The parent project must exist; this is enforced by the persistence
      layer's foreign key, not here
    """

    id: EnvironmentId | None
    project_id: ProjectId
    name: str
    mode: EnvironmentMode
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        require_name(self.name)

    @classmethod
    def create(
        cls,
        project_id: ProjectId,
        name: str,
        mode: EnvironmentMode,
        description: str | None = None,
    ) -> "Environment":
        """Create a new, unsaved environment."""
        return cls(
            id=None,
            project_id=project_id,
            name=require_name(name),
            mode=mode,
            description=normalize_description(description),
        )

    @classmethod
    def create_with_id(
        cls,
        id: EnvironmentId,
        project_id: ProjectId,
        name: str,
        mode: EnvironmentMode,
        description: str | None,
        created_at: datetime | None,
        updated_at: datetime | None,
    ) -> "Environment":
        """Reconstitute an environment from persistence."""
        return cls(
            id=id,
            project_id=project_id,
            name=name,
            mode=mode,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )
