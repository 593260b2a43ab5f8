"""
Core dispatch primitives.

- ShouldEvent / DidEvent: the two phases of an action
- Channel: synchronous multicast push primitive
- Registry: action type -> channel pair + reducer wiring
- LifecycleManager: teardown of reducer wiring
- Emitter: dispatch / on / register / destroy
"""

from .events import ShouldEvent, DidEvent, Reducer
from .channel import Channel, Subscription, Subscribable
from .registry import Registry, ChannelPair, RegistrationRecord
from .lifecycle import LifecycleManager, TeardownPolicy
from .emitter import Emitter
from .errors import TduxError, UnregisteredActionError, DuplicateReducerError

__all__ = [
    "ShouldEvent",
    "DidEvent",
    "Reducer",
    "Channel",
    "Subscription",
    "Subscribable",
    "Registry",
    "ChannelPair",
    "RegistrationRecord",
    "LifecycleManager",
    "TeardownPolicy",
    "Emitter",
    "TduxError",
    "UnregisteredActionError",
    "DuplicateReducerError",
]
