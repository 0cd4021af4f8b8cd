"""
Domain common module.

Contains base classes for domain modeling:
- Entity / EntityId: Objects with identity and their typed identifiers
- DomainError / ValidationError: Domain-level failures
"""

from .entity import Entity, EntityId
from .exceptions import DomainError, ValidationError

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "ValidationError",
]
