"""Pytest configuration and fixtures."""

import threading
from collections.abc import Generator
from typing import Any
from uuid import uuid4

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from provisioner import models
from provisioner.application.scm.protocols.source_control_provider import (
    ProviderRepository,
    RateLimit,
)
from provisioner.core import container
from provisioner.database import Base, enable_sqlite_foreign_keys
from provisioner.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(test_engine)

# Create test session factory
TestSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, expire_on_commit=False, bind=test_engine
)


class RecordingProvider:
    """In-memory stand-in for GitHub that records every call."""

    def __init__(self, owner: str = "acme") -> None:
        self.owner = owner
        self.calls: list[tuple[str, bool]] = []
        self.error: Exception | None = None
        self.rate_limit = RateLimit(limit=5000, remaining=4999, reset=1_700_000_000, used=1)
        self._next_id = 1000
        self._lock = threading.Lock()

    def create_repository(self, name: str, private: bool = False) -> ProviderRepository:
        with self._lock:
            self.calls.append((name, private))
            if self.error is not None:
                raise self.error
            self._next_id += 1
            provider_id = self._next_id
        return ProviderRepository(
            provider_id=provider_id,
            name=name,
            full_name=f"{self.owner}/{name}",
            default_branch="main",
            private=private,
            size=0,
            ssh_url=f"git@github.com:{self.owner}/{name}.git",
            url=f"https://api.github.com/repos/{self.owner}/{name}",
        )

    def get_rate_limit(self) -> RateLimit:
        if self.error is not None:
            raise self.error
        return self.rate_limit


@pytest.fixture
def session_factory() -> Generator[sessionmaker[Session], None, None]:
    """Session factory over a fresh schema for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)
    try:
        yield TestSessionLocal
    finally:
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Session for arranging and inspecting rows directly."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def github_provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def client(
    session_factory: sessionmaker[Session], github_provider: RecordingProvider
) -> Generator[TestClient, Any, None]:
    """Create a test client wired to the test database and the recording provider."""
    container.session_factory.override(providers.Object(session_factory))
    container.github_provider.override(providers.Object(github_provider))

    with TestClient(app) as test_client:
        yield test_client

    container.session_factory.reset_override()
    container.github_provider.reset_override()


@pytest.fixture
def test_project(db_session: Session) -> models.Project:
    """Create a project row."""
    project = models.Project(owner_id=uuid4(), name="Platform", description="Core platform")
    db_session.add(project)
    db_session.commit()
    db_session.refresh(project)
    return project


@pytest.fixture
def test_environment(db_session: Session, test_project: models.Project) -> models.Environment:
    """Create an environment row inside the test project."""
    environment = models.Environment(project_id=test_project.id, name="dev", mode="development")
    db_session.add(environment)
    db_session.commit()
    db_session.refresh(environment)
    return environment


@pytest.fixture
def test_application(
    db_session: Session, test_environment: models.Environment
) -> models.Application:
    """Create an application row inside the test environment."""
    application = models.Application(environment_id=test_environment.id, name="billing-api")
    db_session.add(application)
    db_session.commit()
    db_session.refresh(application)
    return application
