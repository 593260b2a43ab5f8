"""
Channel: synchronous multicast push primitive.

publish() invokes every subscriber in subscription order, in the caller's
stack. There is no queue and no thread; a subscriber that blocks blocks
the publisher.
"""

from typing import Callable, Generic, List, Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Observer = Callable[[T], None]


class Subscription:
    """
    Handle returned by Channel.subscribe().

    cancel() detaches the observer. Cancelling twice is a no-op, and an
    observer may cancel its own subscription from inside its callback.
    """

    def __init__(self, channel: "Channel", observer: Callable) -> None:
        self._channel = channel
        self._observer = observer
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def cancel(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._channel._detach(self)

    def _deliver(self, value) -> None:
        if not self._closed:
            self._observer(value)


class Subscribable(Protocol[T_co]):
    """Read-only face of a channel: what observers are allowed to touch."""

    def subscribe(self, observer: Callable[[T_co], None]) -> Subscription:
        ...


class Channel(Generic[T]):
    """
    Ordered list of subscribers with synchronous fan-out.

    Usage:
        ch = Channel()
        sub = ch.subscribe(print)
        ch.publish("hello")
        sub.cancel()
    """

    def __init__(self) -> None:
        self._subscriptions: List[Subscription] = []

    def subscribe(self, observer: Observer) -> Subscription:
        """
        Attach observer.

        Args:
            observer: Callable invoked with each published value

        Returns:
            Subscription handle used to cancel delivery

        Raises:
            TypeError: If observer is not callable
        """
        if not callable(observer):
            raise TypeError(f"observer must be callable, got {type(observer).__name__}")
        sub = Subscription(self, observer)
        self._subscriptions.append(sub)
        return sub

    def publish(self, value: T) -> None:
        """
        Deliver value to current subscribers, in subscription order.

        Iterates a snapshot: observers added during this publish see only
        later values, observers cancelled during it are skipped. Exceptions
        raised by an observer propagate and stop delivery of this value.
        """
        for sub in list(self._subscriptions):
            sub._deliver(value)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def cancel_all(self) -> None:
        """Cancel every subscription currently attached."""
        for sub in list(self._subscriptions):
            sub.cancel()

    def _detach(self, sub: Subscription) -> None:
        self._subscriptions.remove(sub)
