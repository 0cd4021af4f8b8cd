"""Protocol for Application repository."""

from typing import Protocol

from provisioner.domain.project.entities.application import Application


class ApplicationRepositoryProtocol(Protocol):
    def save(self, application: Application) -> Application: ...
