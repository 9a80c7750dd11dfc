"""
Generic repository interface (Abstract Base Class).

Defines the read contract shared by all entity repositories
independent of the underlying backend.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """
    Abstract read-only repository over entities of type ``T``.

    Implementations always return fresh data from their backend.
    """

    @abstractmethod
    async def fetch_all(self) -> List[T]:
        """
        Fetch every entity.

        Returns:
            All entities in backend order

        Raises:
            FetchFailedException: If the backend call or decoding fails
        """
        pass

    @abstractmethod
    async def fetch_by_id(self, entity_id: int) -> T:
        """
        Fetch a single entity by identifier.

        Args:
            entity_id: Identifier assigned by the backend

        Returns:
            The matching entity

        Raises:
            FetchFailedException: If the backend call or decoding fails
            UserNotFoundException: If no entity has the identifier
        """
        pass
