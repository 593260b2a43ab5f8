"""
Lifecycle: teardown of reducer wiring.

destroy() disables propagation, it does not un-register types. After
teardown, dispatch still validates its action type and publishes to the
should-channel, but no reducer runs and no DidEvent is produced.
"""

from enum import Enum
from typing import List

from .channel import Channel, Subscription


class TeardownPolicy(str, Enum):
    """
    What destroy() cancels.

    WIRING_ONLY: internal should -> did subscriptions only
    ALL_SUBSCRIPTIONS: wiring plus every external did-channel subscriber
    """
    WIRING_ONLY = "wiring"
    ALL_SUBSCRIPTIONS = "all"


class LifecycleManager:
    """
    Holds subscriptions created at registration time and cancels them on teardown.

    Usage:
        lifecycle = LifecycleManager(TeardownPolicy.WIRING_ONLY)
        lifecycle.track(record.wiring, record.channels.did)
        lifecycle.destroy()
    """

    def __init__(self, policy: TeardownPolicy = TeardownPolicy.WIRING_ONLY) -> None:
        self.policy = TeardownPolicy(policy)
        self._wiring: List[Subscription] = []
        self._did_channels: List[Channel] = []
        self._destroyed = False

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def track(self, wiring: Subscription, did: Channel) -> None:
        """
        Record a registration's wiring subscription and its did-channel.

        Raises:
            RuntimeError: If called after destroy()
        """
        if self._destroyed:
            raise RuntimeError("Cannot register reducers after destroy()")
        self._wiring.append(wiring)
        self._did_channels.append(did)

    def destroy(self) -> int:
        """
        Cancel tracked subscriptions. Safe to call repeatedly.

        Returns:
            Number of external did-subscriptions cancelled (always 0 under WIRING_ONLY)
        """
        self._destroyed = True
        for sub in self._wiring:
            sub.cancel()

        cancelled = 0
        if self.policy is TeardownPolicy.ALL_SUBSCRIPTIONS:
            for did in self._did_channels:
                cancelled += did.subscriber_count
                did.cancel_all()
        return cancelled
