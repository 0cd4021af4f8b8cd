from .remote_repository_repository import RemoteRepositoryRepository

__all__ = ["RemoteRepositoryRepository"]
