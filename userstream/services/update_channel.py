"""
Broadcast update channel.

Fans out published items to every active subscriber, synchronously and in
subscription order. Zero history: subscribers only see items published after
they subscribed. Once disposed the channel is permanently closed.
"""

import itertools
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from ..domain.exceptions import ChannelClosedException
from ..logging_config import get_logger
from ..metrics import channel_published_total, channel_subscribers

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(eq=False)
class Subscription(Generic[T]):
    """A listener's membership in an update channel."""

    subscription_id: int
    callback: Callable[[T], Any] = field(repr=False)
    channel: "UpdateChannel[T]" = field(repr=False, compare=False)
    subscribed_at: datetime = field(default_factory=datetime.now)

    @property
    def active(self) -> bool:
        return self.channel.is_subscribed(self)

    def cancel(self) -> None:
        """Stop receiving updates. Safe to call more than once."""
        self.channel.unsubscribe(self)


class UpdateChannel(Generic[T]):
    """
    Multi-subscriber broadcast channel.

    State machine: open -> disposed, one way. After ``dispose()`` both
    ``subscribe()`` and ``publish()`` raise ``ChannelClosedException``.
    """

    def __init__(self, name: str = "updates"):
        self.name = name
        self._subscriptions: Dict[int, Subscription[T]] = {}
        self._ids = itertools.count(1)
        self._disposed = False

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def is_subscribed(self, subscription: Subscription[T]) -> bool:
        return self._subscriptions.get(subscription.subscription_id) is subscription

    def subscribe(self, callback: Callable[[T], Any]) -> Subscription[T]:
        """
        Register a listener for items published from now on.

        Args:
            callback: Called with each published item

        Returns:
            Subscription handle, used to cancel

        Raises:
            ChannelClosedException: If the channel is disposed
            TypeError: If callback is not callable
        """
        if self._disposed:
            raise ChannelClosedException("subscribe")
        if not callable(callback):
            raise TypeError("callback must be callable")

        subscription = Subscription(
            subscription_id=next(self._ids), callback=callback, channel=self
        )
        self._subscriptions[subscription.subscription_id] = subscription
        channel_subscribers.inc()

        logger.debug(
            "Subscriber added",
            channel=self.name,
            subscription_id=subscription.subscription_id,
            total=len(self._subscriptions),
        )
        return subscription

    def unsubscribe(self, subscription: Subscription[T]) -> None:
        """Remove a subscription. Unknown or cancelled ones are ignored."""
        if not self.is_subscribed(subscription):
            return

        del self._subscriptions[subscription.subscription_id]
        channel_subscribers.dec()
        logger.debug(
            "Subscriber removed",
            channel=self.name,
            subscription_id=subscription.subscription_id,
            remaining=len(self._subscriptions),
        )

    def publish(self, item: T) -> int:
        """
        Deliver an item to every active subscriber.

        Subscribers added during delivery first receive the next item;
        subscribers cancelled during delivery are skipped. A failing
        callback is logged and does not stop delivery to the others.

        Args:
            item: Item to broadcast

        Returns:
            Number of subscribers the item was delivered to

        Raises:
            ChannelClosedException: If the channel is disposed
        """
        if self._disposed:
            raise ChannelClosedException("publish")

        if not self._subscriptions:
            channel_published_total.labels(status="dropped").inc()
            logger.debug("No subscribers, item dropped", channel=self.name)
            return 0

        delivered = 0
        for subscription in list(self._subscriptions.values()):
            if not self.is_subscribed(subscription):
                continue
            delivered += 1
            try:
                subscription.callback(item)
            except Exception as e:
                logger.warning(
                    "Subscriber callback failed",
                    channel=self.name,
                    subscription_id=subscription.subscription_id,
                    error=str(e),
                    exc_info=True,
                )

        channel_published_total.labels(status="delivered").inc()
        return delivered

    def dispose(self) -> None:
        """Close the channel and drop all subscriptions. Idempotent."""
        if self._disposed:
            return

        self._disposed = True
        dropped = len(self._subscriptions)
        self._subscriptions.clear()
        if dropped:
            channel_subscribers.dec(dropped)
        logger.info("Channel disposed", channel=self.name, dropped_subscribers=dropped)

    def __enter__(self) -> "UpdateChannel[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.dispose()
        return None
