"""Application entity."""

from dataclasses import dataclass
from datetime import datetime

from provisioner.domain.common.entity import Entity
from provisioner.domain.common.validation import normalize_description, require_name
from provisioner.domain.common.value_objects import ApplicationId, EnvironmentId


@dataclass
class Application(Entity[ApplicationId]):
    """Application deployed into an environment."""

    id: ApplicationId | None
    environment_id: EnvironmentId
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        require_name(self.name)

    @classmethod
    def create(
        cls, environment_id: EnvironmentId, name: str, description: str | None = None
    ) -> "Application":
        """Create a new, unsaved application."""
        return cls(
            id=None,
            environment_id=environment_id,
            name=require_name(name),
            description=normalize_description(description),
        )

    @classmethod
    def create_with_id(
        cls,
        id: ApplicationId,
        environment_id: EnvironmentId,
        name: str,
        description: str | None,
        created_at: datetime | None,
        updated_at: datetime | None,
    ) -> "Application":
        """Reconstitute an application from persistence."""
        return cls(
            id=id,
            environment_id=environment_id,
            name=name,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )
