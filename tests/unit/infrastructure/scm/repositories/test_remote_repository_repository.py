"""Tests for RemoteRepositoryRepository."""

from uuid import uuid4

import pytest
from sqlalchemy.orm import Session, sessionmaker

from provisioner import models
from provisioner.domain.common.value_objects import ApplicationId
from provisioner.domain.scm.entities import ProvisionedRepository
from provisioner.exceptions import PersistenceConflictError, PersistenceReferenceError
from provisioner.infrastructure.scm.repositories import RemoteRepositoryRepository


def _provisioned(application_id: ApplicationId, provider_id: int = 42) -> ProvisionedRepository:
    return ProvisionedRepository.from_provider(
        application_id=application_id,
        provider_id=provider_id,
        name="billing-api",
        full_name="acme/billing-api",
        default_branch="main",
        private=True,
        size=128,
        ssh_url="git@github.com:acme/billing-api.git",
        url="https://api.github.com/repos/acme/billing-api",
        description="Invoices",
    )


class TestRemoteRepositoryRepository:
    def test_save_records_provisioned_repository(
        self,
        session_factory: sessionmaker[Session],
        db_session: Session,
        test_application: models.Application,
    ) -> None:
        application_id = ApplicationId(test_application.id)
        repository = RemoteRepositoryRepository(session_factory)

        saved = repository.save(_provisioned(application_id))

        assert saved.id is not None
        assert saved.application_id == application_id
        assert saved.provider_id == 42
        assert saved.size == 128
        assert saved.private is True
        assert saved.created_at is not None

        row = db_session.get(models.GitRepository, saved.id.value)
        assert row is not None
        assert row.full_name == "acme/billing-api"
        assert row.application_id == test_application.id

    def test_missing_application_is_reference_error(
        self, session_factory: sessionmaker[Session]
    ) -> None:
        repository = RemoteRepositoryRepository(session_factory)

        with pytest.raises(PersistenceReferenceError):
            repository.save(_provisioned(ApplicationId(uuid4())))

    def test_duplicate_provider_id_is_conflict(
        self, session_factory: sessionmaker[Session], test_application: models.Application
    ) -> None:
        application_id = ApplicationId(test_application.id)
        repository = RemoteRepositoryRepository(session_factory)
        repository.save(_provisioned(application_id, provider_id=7))

        with pytest.raises(PersistenceConflictError):
            repository.save(_provisioned(application_id, provider_id=7))
