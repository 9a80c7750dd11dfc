"""
Live user updates.

Broadcasts newly created users to every listener.
"""

from typing import Any, Callable

from ..domain.entities import User
from .update_channel import Subscription, UpdateChannel


class UserStreamService(UpdateChannel[User]):
    """Update channel of newly added users."""

    def __init__(self):
        super().__init__(name="users")

    def listen(self, callback: Callable[[User], Any]) -> Subscription[User]:
        return self.subscribe(callback)

    def add_user(self, user: User) -> int:
        return self.publish(user)
