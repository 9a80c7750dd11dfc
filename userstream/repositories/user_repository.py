"""
User repository backed by a user API client.

Decodes the JSON collection returned by the client into ``User`` entities.
There is no cache: every call goes to the backend.
"""

import json
import time
from typing import List

from ..domain.entities import User, is_valid_user_id
from ..domain.exceptions import FetchFailedException, UserNotFoundException
from ..infrastructure.fake_api_client import IUserAPIClient
from ..logging_config import get_logger
from ..metrics import track_fetch
from .repository import IRepository

logger = get_logger(__name__)


class UserRepository(IRepository[User]):
    """Repository of users served by an ``IUserAPIClient``."""

    RESOURCE = "users"

    def __init__(self, api_client: IUserAPIClient):
        """
        Initialize repository.

        Args:
            api_client: Backend returning the user collection as JSON
        """
        self.api_client = api_client

    async def fetch_all(self) -> List[User]:
        """
        Fetch and deserialize all users.

        Returns:
            Users in backend order

        Raises:
            FetchFailedException: Wraps transport, JSON and record errors
        """
        start_time = time.time()
        logger.debug("Fetching users")

        try:
            payload = await self.api_client.get_users_json()
            users = self._decode_users(payload)
        except Exception as e:
            track_fetch("fetch_all", "error", time.time() - start_time)
            logger.error("User fetch failed", error=str(e), error_type=type(e).__name__)
            raise FetchFailedException(self.RESOURCE, e) from e

        track_fetch("fetch_all", "success", time.time() - start_time)
        logger.info("Fetched users", count=len(users))
        return users

    async def fetch_by_id(self, entity_id: int) -> User:
        """
        Fetch a user by id with a linear scan over ``fetch_all``.

        Args:
            entity_id: User id

        Returns:
            First user whose id matches

        Raises:
            FetchFailedException: If fetching all users fails
            UserNotFoundException: If no user has the id
        """
        start_time = time.time()
        if not is_valid_user_id(entity_id):
            track_fetch("fetch_by_id", "not_found", time.time() - start_time)
            logger.info("Invalid user id", user_id=repr(entity_id))
            raise UserNotFoundException(entity_id)

        try:
            users = await self.fetch_all()
        except FetchFailedException:
            track_fetch("fetch_by_id", "error", time.time() - start_time)
            raise

        for user in users:
            if user.id == entity_id:
                track_fetch("fetch_by_id", "success", time.time() - start_time)
                return user

        track_fetch("fetch_by_id", "not_found", time.time() - start_time)
        logger.info("User not found", user_id=entity_id)
        raise UserNotFoundException(entity_id)

    @staticmethod
    def _decode_users(payload: str) -> List[User]:
        """Decode a JSON array of user records."""
        decoded = json.loads(payload)
        if not isinstance(decoded, list):
            raise TypeError(
                f"Expected a JSON array of users, got {type(decoded).__name__}"
            )
        return [User.from_dict(record) for record in decoded]
