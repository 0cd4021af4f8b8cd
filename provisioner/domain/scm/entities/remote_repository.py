"""
Remote repository entities.

A remote repository moves through three states:

1. requested - only a name and visibility, nothing exists yet
2. provisioned - created at the provider, bound to an application,
   not yet recorded locally (``ProvisionedRepository``)
3. saved - recorded locally with an id and timestamps (``RemoteRepository``)

If the process fails between 2 and 3 the remote repository exists at the
provider without a local record.
"""

import re
from dataclasses import dataclass
from datetime import datetime

from provisioner.domain.common.entity import Entity
from provisioner.domain.common.exceptions import ValidationError
from provisioner.domain.common.validation import require_name
from provisioner.domain.common.value_objects import ApplicationId, RemoteRepositoryId

MAX_REPOSITORY_NAME_LENGTH = 100
_REPOSITORY_NAME_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")


def validate_repository_name(name: str) -> str:
    """
    Validate a repository name against the provider's naming rules.

    Returns:
        The stripped name

    Raises:
        ValidationError: If the name is empty, too long or has invalid characters
    """
    name = require_name(name, max_length=MAX_REPOSITORY_NAME_LENGTH)
    if not _REPOSITORY_NAME_PATTERN.match(name) or name in (".", ".."):
        raise ValidationError(
            "Repository name may only contain letters, digits, '-', '_' and '.'",
            field="name",
            value=name,
        )
    return name


@dataclass(frozen=True)
class ProvisionedRepository:
    """
    A repository that exists at the provider but is not yet recorded locally.

    The provider knows nothing about applications, so ``application_id`` is
    bound here, once, when the provider response is accepted.
    """

    application_id: ApplicationId
    provider_id: int
    name: str
    full_name: str
    default_branch: str
    private: bool
    size: int
    ssh_url: str
    url: str
    description: str | None = None

    @classmethod
    def from_provider(
        cls,
        application_id: ApplicationId,
        provider_id: int,
        name: str,
        full_name: str,
        default_branch: str,
        private: bool,
        size: int,
        ssh_url: str,
        url: str,
        description: str | None = None,
    ) -> "ProvisionedRepository":
        """Bind a provider-created repository to the application that requested it."""
        return cls(
            application_id=application_id,
            provider_id=provider_id,
            name=name,
            full_name=full_name,
            default_branch=default_branch,
            private=private,
            size=size,
            ssh_url=ssh_url,
            url=url,
            description=description,
        )


@dataclass
class RemoteRepository(Entity[RemoteRepositoryId]):
    """
    Source-control repository recorded against an application.

    Business Rules:
    - provider_id is assigned by the provider and never changes
    - application_id is assigned once, when the repository is provisioned
    """

    id: RemoteRepositoryId | None
    application_id: ApplicationId
    provider_id: int
    name: str
    full_name: str
    default_branch: str
    private: bool
    size: int
    ssh_url: str
    url: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        require_name(self.name)
        if self.size < 0:
            raise ValidationError("Repository size cannot be negative", field="size")

    @classmethod
    def create_with_id(
        cls,
        id: RemoteRepositoryId,
        provisioned: ProvisionedRepository,
        created_at: datetime | None,
        updated_at: datetime | None,
    ) -> "RemoteRepository":
        """Record a provisioned repository under its persisted identity."""
        return cls(
            id=id,
            application_id=provisioned.application_id,
            provider_id=provisioned.provider_id,
            name=provisioned.name,
            full_name=provisioned.full_name,
            default_branch=provisioned.default_branch,
            private=provisioned.private,
            size=provisioned.size,
            ssh_url=provisioned.ssh_url,
            url=provisioned.url,
            description=provisioned.description,
            created_at=created_at,
            updated_at=updated_at,
        )
