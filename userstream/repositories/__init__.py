"""
Repository layer - Data access abstractions.

This layer provides interfaces for data retrieval,
hiding backend and serialization details from callers.
"""

from .repository import IRepository
from .user_repository import UserRepository

__all__ = ["IRepository", "UserRepository"]
