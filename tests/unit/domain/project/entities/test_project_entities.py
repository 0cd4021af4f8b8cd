"""Tests for Project, Environment and Application entities."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from provisioner.domain.common.exceptions import ValidationError
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


class TestProject:
    def test_create_is_unsaved(self) -> None:
        project = Project.create(owner_id=UserId(uuid4()), name="Platform")
        assert project.id is None
        assert not project.is_saved
        assert project.created_at is None

    def test_create_strips_name_and_description(self) -> None:
        project = Project.create(
            owner_id=UserId(uuid4()), name="  Platform  ", description="  core  "
        )
        assert project.name == "Platform"
        assert project.description == "core"

    def test_blank_description_becomes_none(self) -> None:
        project = Project.create(owner_id=UserId(uuid4()), name="Platform", description="   ")
        assert project.description is None

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_create_rejects_empty_name(self, name: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Project.create(owner_id=UserId(uuid4()), name=name)
        assert exc_info.value.field == "name"

    def test_name_length_limit(self) -> None:
        owner_id = UserId(uuid4())
        assert Project.create(owner_id=owner_id, name="p" * 255).name == "p" * 255
        with pytest.raises(ValidationError) as exc_info:
            Project.create(owner_id=owner_id, name="p" * 300)
        assert exc_info.value.field == "name"

    def test_create_with_id_is_saved(self) -> None:
        now = datetime.now(UTC)
        project = Project.create_with_id(
            id=ProjectId(uuid4()),
            owner_id=UserId(uuid4()),
            name="Platform",
            description=None,
            created_at=now,
            updated_at=now,
        )
        assert project.is_saved
        assert project.created_at == now


class TestEnvironmentMode:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("development", EnvironmentMode.DEVELOPMENT),
            ("STAGING", EnvironmentMode.STAGING),
            (" Production ", EnvironmentMode.PRODUCTION),
            (EnvironmentMode.STAGING, EnvironmentMode.STAGING),
        ],
    )
    def test_parse(self, raw: str, expected: EnvironmentMode) -> None:
        assert EnvironmentMode.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["", "prod", "qa"])
    def test_parse_rejects_unknown_mode(self, raw: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            EnvironmentMode.parse(raw)
        assert exc_info.value.field == "mode"


class TestEnvironment:
    def test_create(self) -> None:
        project_id = ProjectId(uuid4())
        environment = Environment.create(
            project_id=project_id, name="staging", mode=EnvironmentMode.STAGING
        )
        assert environment.id is None
        assert environment.project_id == project_id
        assert environment.mode is EnvironmentMode.STAGING

    def test_create_rejects_empty_name(self) -> None:
        with pytest.raises(ValidationError):
            Environment.create(
                project_id=ProjectId(uuid4()), name=" ", mode=EnvironmentMode.DEVELOPMENT
            )

    def test_create_rejects_oversized_name(self) -> None:
        with pytest.raises(ValidationError):
            Environment.create(
                project_id=ProjectId(uuid4()), name="e" * 256, mode=EnvironmentMode.DEVELOPMENT
            )


class TestApplication:
    def test_create(self) -> None:
        environment_id = EnvironmentId(uuid4())
        application = Application.create(environment_id=environment_id, name="billing-api")
        assert application.id is None
        assert application.environment_id == environment_id
        assert application.name == "billing-api"

    def test_create_rejects_empty_name(self) -> None:
        with pytest.raises(ValidationError):
            Application.create(environment_id=EnvironmentId(uuid4()), name="")

    def test_create_rejects_oversized_name(self) -> None:
        with pytest.raises(ValidationError):
            Application.create(environment_id=EnvironmentId(uuid4()), name="a" * 256)

    def test_create_with_id(self) -> None:
        application_id = ApplicationId(uuid4())
        application = Application.create_with_id(
            id=application_id,
            environment_id=EnvironmentId(uuid4()),
            name="billing-api",
            description="Invoices",
            created_at=None,
            updated_at=None,
        )
        assert application.id == application_id
        assert application.is_saved
