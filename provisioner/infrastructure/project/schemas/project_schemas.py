"""Pydantic schemas for Project, Environment and Application API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from provisioner.domain.common.value_objects import (
    ApplicationId,
    EnvironmentId,
    ProjectId,
    UserId,
)
from provisioner.domain.project.entities import (
    Application,
    Environment,
    EnvironmentMode,
    Project,
)


class ProjectCreateRequest(BaseModel):
    """Schema for creating a project."""

    owner_id: str = Field(..., description="UUID of the owning user")
    name: str = Field(..., description="Project name")
    description: str | None = Field(None, description="Optional project description")


class ProjectResponse(BaseModel):
    """Schema for Project response."""

    id: UUID
    owner_id: UUID
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectResponse":
        assert project.id is not None
        return cls(
            id=project.id.value,
            owner_id=project.owner_id.value,
            name=project.name,
            description=project.description,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )

    def to_entity(self) -> Project:
        return Project.create_with_id(
            id=ProjectId(self.id),
            owner_id=UserId(self.owner_id),
            name=self.name,
            description=self.description,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class EnvironmentCreateRequest(BaseModel):
    """Schema for creating an environment inside a project."""

    project_id: str = Field(..., description="UUID of the parent project")
    name: str = Field(..., description="Environment name")
    mode: str = Field(
        EnvironmentMode.DEVELOPMENT.value,
        description="One of development, staging or production",
    )
    description: str | None = Field(None, description="Optional environment description")


class EnvironmentResponse(BaseModel):
    """Schema for Environment response."""

    id: UUID
    project_id: UUID
    name: str
    mode: EnvironmentMode
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, environment: Environment) -> "EnvironmentResponse":
        assert environment.id is not None
        return cls(
            id=environment.id.value,
            project_id=environment.project_id.value,
            name=environment.name,
            mode=environment.mode,
            description=environment.description,
            created_at=environment.created_at,
            updated_at=environment.updated_at,
        )

    def to_entity(self) -> Environment:
        return Environment.create_with_id(
            id=EnvironmentId(self.id),
            project_id=ProjectId(self.project_id),
            name=self.name,
            mode=self.mode,
            description=self.description,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class ApplicationCreateRequest(BaseModel):
    """Schema for creating an application inside an environment."""

    environment_id: str = Field(..., description="UUID of the parent environment")
    name: str = Field(..., description="Application name")
    description: str | None = Field(None, description="Optional application description")


class ApplicationResponse(BaseModel):
    """Schema for Application response."""

    id: UUID
    environment_id: UUID
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationResponse":
        assert application.id is not None
        return cls(
            id=application.id.value,
            environment_id=application.environment_id.value,
            name=application.name,
            description=application.description,
            created_at=application.created_at,
            updated_at=application.updated_at,
        )

    def to_entity(self) -> Application:
        return Application.create_with_id(
            id=ApplicationId(self.id),
            environment_id=EnvironmentId(self.environment_id),
            name=self.name,
            description=self.description,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
