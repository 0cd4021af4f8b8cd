from .remote_repository import ProvisionedRepository, RemoteRepository, validate_repository_name

__all__ = [
    "ProvisionedRepository",
    "RemoteRepository",
    "validate_repository_name",
]
