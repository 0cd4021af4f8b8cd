from .backoff import BackoffPolicy
from .github_provider import GithubProvider, create_github_client

__all__ = [
    "BackoffPolicy",
    "GithubProvider",
    "create_github_client",
]
