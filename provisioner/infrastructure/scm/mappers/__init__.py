from .remote_repository_mapper import RemoteRepositoryMapper

__all__ = ["RemoteRepositoryMapper"]
