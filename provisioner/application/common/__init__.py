"""
Application common module.

Contains base classes for the application layer:
- Command: Base class for write operations
"""

from .command import Command

__all__ = [
    "Command",
]
