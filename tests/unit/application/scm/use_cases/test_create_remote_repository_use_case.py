"""Tests for CreateRemoteRepositoryUseCase."""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime
from typing import Any
from unittest.mock import MagicMock
from uuid import uuid4

import httpx
import pytest

from provisioner.application.scm.commands import CreateRemoteRepositoryCommand
from provisioner.application.scm.use_cases import (
    CreateRemoteRepositoryUseCase,
    GetProviderRateLimitUseCase,
    create_remote_repository_use_case,
)
from provisioner.config import GithubConfig
from provisioner.domain.common.exceptions import ValidationError
from provisioner.domain.common.value_objects import ApplicationId, RemoteRepositoryId
from provisioner.domain.scm.entities import ProvisionedRepository, RemoteRepository
from provisioner.exceptions import (
    PersistenceRejectedError,
    PersistenceUnavailableError,
    ProviderTransientError,
    RateLimitExceededError,
)
from provisioner.infrastructure.scm.services import GithubProvider, create_github_client


class RecordingRemoteRepositoryStore:
    def __init__(self) -> None:
        self.saved: list[ProvisionedRepository] = []
        self.error: Exception | None = None
        self._lock = threading.Lock()

    def save(self, repository: ProvisionedRepository) -> RemoteRepository:
        with self._lock:
            self.saved.append(repository)
        if self.error is not None:
            raise self.error
        now = datetime.now(UTC)
        return RemoteRepository.create_with_id(
            id=RemoteRepositoryId(uuid4()),
            provisioned=repository,
            created_at=now,
            updated_at=now,
        )


@pytest.fixture
def store() -> RecordingRemoteRepositoryStore:
    return RecordingRemoteRepositoryStore()


@pytest.fixture
def use_case(github_provider, store) -> CreateRemoteRepositoryUseCase:  # noqa: ANN001
    return CreateRemoteRepositoryUseCase(
        provider=github_provider, remote_repository_repository=store
    )


class TestCreateRemoteRepositoryUseCase:
    def test_success_binds_application_and_provider_id(
        self, use_case, github_provider, store  # noqa: ANN001
    ) -> None:
        application_id = uuid4()

        repository = use_case.create(
            CreateRemoteRepositoryCommand(application_id=str(application_id), name="billing-api")
        )

        assert repository.id is not None
        assert repository.application_id == ApplicationId(application_id)
        assert repository.provider_id == 1001
        assert repository.full_name == "acme/billing-api"
        assert github_provider.calls == [("billing-api", False)]
        assert len(store.saved) == 1
        assert store.saved[0].application_id == ApplicationId(application_id)

    def test_private_flag_is_forwarded(self, use_case, github_provider) -> None:  # noqa: ANN001
        repository = use_case.create(
            CreateRemoteRepositoryCommand(application_id=uuid4(), name="secrets", private=True)
        )

        assert github_provider.calls == [("secrets", True)]
        assert repository.private is True

    @pytest.mark.parametrize("name", ["", "   ", "bad name", "x" * 101])
    def test_invalid_name_touches_no_port(
        self, use_case, github_provider, store, name: str  # noqa: ANN001
    ) -> None:
        with pytest.raises(ValidationError):
            use_case.create(CreateRemoteRepositoryCommand(application_id=uuid4(), name=name))

        assert github_provider.calls == []
        assert store.saved == []

    def test_malformed_application_id_touches_no_port(
        self, use_case, github_provider, store  # noqa: ANN001
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            use_case.create(CreateRemoteRepositoryCommand(application_id="nope", name="repo"))

        assert exc_info.value.field == "application_id"
        assert github_provider.calls == []
        assert store.saved == []

    def test_rate_limited_provider_persists_nothing(
        self, use_case, github_provider, store  # noqa: ANN001
    ) -> None:
        github_provider.error = RateLimitExceededError()

        with pytest.raises(RateLimitExceededError):
            use_case.create(CreateRemoteRepositoryCommand(application_id=uuid4(), name="repo"))

        assert len(github_provider.calls) == 1
        assert store.saved == []

    def test_transient_provider_failure_persists_nothing(
        self, use_case, github_provider, store  # noqa: ANN001
    ) -> None:
        github_provider.error = ProviderTransientError("boom", upstream_status=500, attempts=4)

        with pytest.raises(ProviderTransientError) as exc_info:
            use_case.create(CreateRemoteRepositoryCommand(application_id=uuid4(), name="repo"))

        assert exc_info.value.upstream_status == 500
        assert store.saved == []

    def test_persistence_failure_after_provider_success_is_surfaced(
        self, use_case, github_provider, store  # noqa: ANN001
    ) -> None:
        store.error = PersistenceUnavailableError("database down")

        with pytest.raises(PersistenceUnavailableError):
            use_case.create(CreateRemoteRepositoryCommand(application_id=uuid4(), name="repo"))

        # The remote repository was created exactly once and is not retried
        assert len(github_provider.calls) == 1
        assert len(store.saved) == 1

    def test_unsaved_remote_repository_is_logged_as_orphaned(
        self, use_case, store, monkeypatch: pytest.MonkeyPatch  # noqa: ANN001
    ) -> None:
        log = MagicMock()
        monkeypatch.setattr(create_remote_repository_use_case, "logger", log)
        store.error = PersistenceRejectedError("Cannot save remote repository: database error")

        with pytest.raises(PersistenceRejectedError):
            use_case.create(CreateRemoteRepositoryCommand(application_id=uuid4(), name="repo"))

        log.error.assert_called_once()
        assert log.error.call_args.args == ("remote_repository_orphaned",)
        assert log.error.call_args.kwargs["provider_id"] == 1001
        assert log.error.call_args.kwargs["full_name"] == "acme/repo"

    def test_concurrent_creations_with_distinct_names(
        self, use_case, github_provider, store  # noqa: ANN001
    ) -> None:
        application_id = uuid4()
        commands = [
            CreateRemoteRepositoryCommand(application_id=application_id, name=f"repo-{i}")
            for i in range(2)
        ]

        with ThreadPoolExecutor(max_workers=2) as executor:
            results = list(executor.map(use_case.create, commands))

        assert {r.name for r in results} == {"repo-0", "repo-1"}
        assert len({r.provider_id for r in results}) == 2
        assert len(github_provider.calls) == 2
        assert len(store.saved) == 2


GITHUB_REPOSITORY_BODY = {
    "id": 987654,
    "name": "billing-api",
    "full_name": "acme/billing-api",
    "default_branch": "main",
    "description": None,
    "private": False,
    "size": 0,
    "ssh_url": "git@github.com:acme/billing-api.git",
    "url": "https://api.github.com/repos/acme/billing-api",
}


class GithubBackedUseCase:
    """The use case wired to the real GitHub adapter over a scripted transport."""

    def __init__(
        self, store: RecordingRemoteRepositoryStore, *responses: tuple[int, dict[str, Any]]
    ) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []
        config = GithubConfig(owner="acme", token="secret-token", max_retry=0)
        client = create_github_client(config, transport=httpx.MockTransport(self._handle))
        provider = GithubProvider(client, config, sleep=lambda _: None)
        self.use_case = CreateRemoteRepositoryUseCase(
            provider=provider, remote_repository_repository=store
        )

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, body = self.responses.pop(0)
        return httpx.Response(status_code, json=body)


class TestCreateRemoteRepositoryOverGithub:
    def test_created_repository_is_saved_with_provider_id(
        self, store: RecordingRemoteRepositoryStore
    ) -> None:
        harness = GithubBackedUseCase(store, (201, GITHUB_REPOSITORY_BODY))
        application_id = uuid4()

        repository = harness.use_case.create(
            CreateRemoteRepositoryCommand(application_id=application_id, name="billing-api")
        )

        assert repository.provider_id == 987654
        assert repository.full_name == "acme/billing-api"
        assert repository.application_id == ApplicationId(application_id)
        assert len(harness.requests) == 1
        assert [saved.provider_id for saved in store.saved] == [987654]

    def test_forbidden_response_persists_nothing(
        self, store: RecordingRemoteRepositoryStore
    ) -> None:
        harness = GithubBackedUseCase(store, (403, {"message": "API rate limit exceeded"}))

        with pytest.raises(RateLimitExceededError):
            harness.use_case.create(
                CreateRemoteRepositoryCommand(application_id=uuid4(), name="billing-api")
            )

        assert len(harness.requests) == 1
        assert store.saved == []

    def test_store_failure_after_creation_sends_one_request(
        self, store: RecordingRemoteRepositoryStore
    ) -> None:
        store.error = PersistenceUnavailableError("database down")
        harness = GithubBackedUseCase(store, (201, GITHUB_REPOSITORY_BODY))

        with pytest.raises(PersistenceUnavailableError):
            harness.use_case.create(
                CreateRemoteRepositoryCommand(application_id=uuid4(), name="billing-api")
            )

        assert len(harness.requests) == 1
        assert len(store.saved) == 1


class TestGetProviderRateLimitUseCase:
    def test_returns_provider_window(self, github_provider) -> None:  # noqa: ANN001
        rate_limit = GetProviderRateLimitUseCase(provider=github_provider).get_rate_limit()

        assert rate_limit.limit == 5000
        assert rate_limit.remaining == 4999
