from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[], T]:
    """
    Create a FastAPI dependency for a container provider.

    Use cases and repositories are built per request; the engine, session
    factory and provider client they receive are process-wide singletons.
    """

    def dependency() -> T:
        return provider()

    return dependency
