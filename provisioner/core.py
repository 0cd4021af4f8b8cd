from collections.abc import Generator

import httpx
from dependency_injector import containers, providers
from sqlalchemy.engine import Engine

from provisioner.application.project.use_cases import (
    CreateApplicationUseCase,
    CreateEnvironmentUseCase,
    CreateProjectUseCase,
)
from provisioner.application.scm.use_cases import (
    CreateRemoteRepositoryUseCase,
    GetProviderRateLimitUseCase,
)
from provisioner.config import GithubConfig, Settings, get_settings
from provisioner.database import create_database_engine, create_session_factory
from provisioner.infrastructure.project.repositories import (
    ApplicationRepository,
    EnvironmentRepository,
    ProjectRepository,
)
from provisioner.infrastructure.scm.repositories import RemoteRepositoryRepository
from provisioner.infrastructure.scm.services import GithubProvider, create_github_client


def init_engine(settings: Settings) -> Generator[Engine, None, None]:
    engine = create_database_engine(settings)
    yield engine
    engine.dispose()


def init_github_client(config: GithubConfig) -> Generator[httpx.Client, None, None]:
    client = create_github_client(config)
    yield client
    client.close()


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)
    github_config = providers.Callable(lambda settings: settings.github_config, settings)

    # Process-lifetime resources, released by shutdown_resources()
    engine = providers.Resource(init_engine, settings=settings)
    http_client = providers.Resource(init_github_client, config=github_config)

    session_factory = providers.Singleton(create_session_factory, engine=engine)
    github_provider = providers.Singleton(GithubProvider, client=http_client, config=github_config)

    # Repositories
    project_repository = providers.Factory(ProjectRepository, session_factory=session_factory)
    environment_repository = providers.Factory(
        EnvironmentRepository, session_factory=session_factory
    )
    application_repository = providers.Factory(
        ApplicationRepository, session_factory=session_factory
    )
    remote_repository_repository = providers.Factory(
        RemoteRepositoryRepository, session_factory=session_factory
    )

    # Project module, application use cases
    create_project_use_case = providers.Factory(
        CreateProjectUseCase,
        project_repository=project_repository,
    )
    create_environment_use_case = providers.Factory(
        CreateEnvironmentUseCase,
        environment_repository=environment_repository,
    )
    create_application_use_case = providers.Factory(
        CreateApplicationUseCase,
        application_repository=application_repository,
    )

    # SCM module, application use cases
    create_remote_repository_use_case = providers.Factory(
        CreateRemoteRepositoryUseCase,
        provider=github_provider,
        remote_repository_repository=remote_repository_repository,
    )
    get_provider_rate_limit_use_case = providers.Factory(
        GetProviderRateLimitUseCase,
        provider=github_provider,
    )


# Initialize container
container = Container()
