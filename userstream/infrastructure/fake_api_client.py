"""
User API client interface and simulated backend.

``IUserAPIClient`` is the contract a real network client would implement.
``FakeApiService`` is an in-process stand-in that serves a fixed user table
after a constant artificial delay.
"""

import asyncio
import copy
import json
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional

from ..config import settings
from ..logging_config import get_logger
from ..metrics import api_calls_total

logger = get_logger(__name__)

DEFAULT_USER_RECORDS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Alice", "email": "alice@mail.com"},
    {"id": 2, "name": "Bob", "email": "bob@mail.com"},
    {"id": 3, "name": "Charlie", "email": "charlie@mail.com"},
]

SleepFunc = Callable[[float], Awaitable[Any]]


class IUserAPIClient(ABC):
    """
    Abstract interface for user data backends.

    Implementations return the whole user collection as a JSON array of
    ``{"id", "name", "email"}`` records.
    """

    @abstractmethod
    async def get_users_json(self) -> str:
        """
        Fetch all users as a serialized JSON array.

        Returns:
            JSON text of the user collection

        Raises:
            Exception: Transport errors of a real backend
        """
        pass

    @abstractmethod
    def get_health_status(self) -> dict:
        """
        Get client health status.

        Returns:
            Dictionary with health information
        """
        pass


class FakeApiService(IUserAPIClient):
    """
    Simulated remote user API.

    Every call suspends for the same fixed delay before answering, modelling
    network latency. The record table is read-only after construction.
    """

    PROVIDER = "fake-api"

    def __init__(
        self,
        records: Optional[Iterable[Dict[str, Any]]] = None,
        delay_seconds: Optional[float] = None,
        sleep: SleepFunc = asyncio.sleep,
    ):
        """
        Initialize the simulated backend.

        Args:
            records: Seed records, defaults to Alice, Bob and Charlie
            delay_seconds: Artificial latency, defaults to settings
            sleep: Coroutine function used to wait, replaceable in tests

        Raises:
            ValueError: If the delay is not strictly positive
        """
        if delay_seconds is None:
            delay_seconds = settings.FAKE_API_DELAY_SECONDS
        if delay_seconds <= 0:
            raise ValueError(f"delay_seconds must be positive, got {delay_seconds}")

        source = DEFAULT_USER_RECORDS if records is None else records
        self._database: List[Dict[str, Any]] = copy.deepcopy(list(source))
        self.delay_seconds = delay_seconds
        self._sleep = sleep
        self.call_count = 0

    async def fetch_serialized_collection(self) -> List[Dict[str, Any]]:
        """
        Return a snapshot of all records after the artificial delay.

        Returns:
            Copy of the record table in insertion order
        """
        self.call_count += 1
        api_calls_total.labels(provider=self.PROVIDER).inc()
        logger.debug(
            "Simulating backend latency",
            delay_seconds=self.delay_seconds,
            call=self.call_count,
        )
        await self._sleep(self.delay_seconds)
        return copy.deepcopy(self._database)

    async def get_users_json(self) -> str:
        """Fetch all users as a JSON array."""
        return json.dumps(await self.fetch_serialized_collection())

    def get_health_status(self) -> dict:
        return {
            "service": self.PROVIDER,
            "available": True,
            "delay_seconds": self.delay_seconds,
            "records": len(self._database),
            "calls": self.call_count,
        }
