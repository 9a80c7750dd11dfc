"""
userstream package.

Repository access to a simulated user API plus a broadcast stream of
newly created users.
"""

__version__ = "1.0.0"
__description__ = "Layered user repository with live update streaming"

from .config import settings
from .domain.entities import User
from .domain.exceptions import (
    ChannelClosedException,
    FetchFailedException,
    MalformedRecordException,
    UserNotFoundException,
    UserStreamException,
)
from .infrastructure.fake_api_client import FakeApiService, IUserAPIClient
from .repositories import IRepository, UserRepository
from .services import Subscription, UpdateChannel, UserStreamService

__all__ = [
    "ChannelClosedException",
    "FakeApiService",
    "FetchFailedException",
    "IRepository",
    "IUserAPIClient",
    "MalformedRecordException",
    "Subscription",
    "UpdateChannel",
    "User",
    "UserNotFoundException",
    "UserRepository",
    "UserStreamException",
    "UserStreamService",
    "settings",
    "__version__",
]
