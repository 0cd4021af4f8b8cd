"""Pydantic schemas for remote repository API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from provisioner.application.scm.protocols.source_control_provider import RateLimit
from provisioner.domain.common.value_objects import ApplicationId, RemoteRepositoryId
from provisioner.domain.scm.entities import ProvisionedRepository, RemoteRepository


class RemoteRepositoryCreateRequest(BaseModel):
    """Schema for provisioning a remote repository for an application."""

    application_id: str = Field(..., description="UUID of the owning application")
    name: str = Field(..., description="Repository name at the provider")
    private: bool = Field(False, description="Create the repository as private")


class RemoteRepositoryResponse(BaseModel):
    """Schema for RemoteRepository response."""

    id: UUID
    application_id: UUID
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

    @classmethod
    def from_entity(cls, repository: RemoteRepository) -> "RemoteRepositoryResponse":
        assert repository.id is not None
        return cls(
            id=repository.id.value,
            application_id=repository.application_id.value,
            provider_id=repository.provider_id,
            name=repository.name,
            full_name=repository.full_name,
            default_branch=repository.default_branch,
            private=repository.private,
            size=repository.size,
            ssh_url=repository.ssh_url,
            url=repository.url,
            description=repository.description,
            created_at=repository.created_at,
            updated_at=repository.updated_at,
        )

    def to_entity(self) -> RemoteRepository:
        provisioned = ProvisionedRepository(
            application_id=ApplicationId(self.application_id),
            provider_id=self.provider_id,
            name=self.name,
            full_name=self.full_name,
            default_branch=self.default_branch,
            private=self.private,
            size=self.size,
            ssh_url=self.ssh_url,
            url=self.url,
            description=self.description,
        )
        return RemoteRepository.create_with_id(
            id=RemoteRepositoryId(self.id),
            provisioned=provisioned,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class RateLimitResponse(BaseModel):
    """Schema for the provider's current rate-limit window."""

    limit: int = Field(..., description="Requests allowed per window")
    remaining: int = Field(..., description="Requests left in the current window")
    reset: int = Field(..., description="Epoch seconds when the window resets")
    used: int = Field(0, description="Requests used in the current window")

    @classmethod
    def from_rate_limit(cls, rate_limit: RateLimit) -> "RateLimitResponse":
        return cls(
            limit=rate_limit.limit,
            remaining=rate_limit.remaining,
            reset=rate_limit.reset,
            used=rate_limit.used,
        )
