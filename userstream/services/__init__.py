"""
Service layer - Live update broadcasting.
"""

from .update_channel import Subscription, UpdateChannel
from .user_stream_service import UserStreamService

__all__ = ["Subscription", "UpdateChannel", "UserStreamService"]
