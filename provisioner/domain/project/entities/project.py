"""Project entity: the root of the organizational resource tree."""

from dataclasses import dataclass
from datetime import datetime

from provisioner.domain.common.entity import Entity
from provisioner.domain.common.validation import normalize_description, require_name
from provisioner.domain.common.value_objects import ProjectId, UserId


@dataclass
class Project(Entity[ProjectId]):
    """
    Project owned by a single user.

    Business Rules:
    - Name cannot be empty
    - Owner never changes after creation
    """

    id: ProjectId | None
    owner_id: UserId
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        require_name(self.name)

    @classmethod
    def create(cls, owner_id: UserId, name: str, description: str | None = None) -> "Project":
        """Create a new, unsaved project (id is assigned on persistence)."""
        return cls(
            id=None,
            owner_id=owner_id,
            name=require_name(name),
            description=normalize_description(description),
        )

    @classmethod
    def create_with_id(
        cls,
        id: ProjectId,
        owner_id: UserId,
        name: str,
        description: str | None,
        created_at: datetime | None,
        updated_at: datetime | None,
    ) -> "Project":
        """Reconstitute a project from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            name=name,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )
