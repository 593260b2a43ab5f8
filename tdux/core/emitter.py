"""
Emitter: public dispatch / observe surface.

    emitter = Emitter({"OPEN": open_reducer})
    emitter.on("OPEN").subscribe(print)
    emitter.dispatch("OPEN", ShouldEvent(id=1, value=True))

dispatch() is fully synchronous: the reducer has run and every did-observer
subscribed at the time has been called before it returns. Reducers and
observers may dispatch again (same or other type); the nested dispatch
completes before the outer one continues. There are no locks and no
timeouts, so a reducer or observer that blocks blocks the caller. An
instance is meant for use from a single thread.
"""

from typing import Hashable, List, Mapping, Optional

from .. import config
from ..logging_config import get_logger
from .channel import Subscribable
from .errors import UnregisteredActionError
from .events import DidEvent, Reducer, ShouldEvent
from .lifecycle import LifecycleManager, TeardownPolicy
from .registry import Registry


class Emitter:
    """
    Registry of reducers with should/did channels per action type.

    At most one reducer per action type. Reducers may be supplied all at
    once to the constructor, or added later with register().

    Args:
        reducers: Mapping of action type -> reducer, registered in order
        name: Used as trace_id in log records
        teardown_policy: What destroy() cancels (default: from TDUX_TEARDOWN_POLICY)
    """

    def __init__(
        self,
        reducers: Optional[Mapping[Hashable, Reducer]] = None,
        *,
        name: Optional[str] = None,
        teardown_policy: Optional[TeardownPolicy] = None,
    ) -> None:
        if teardown_policy is None:
            teardown_policy = config.Settings.from_env().teardown_policy

        self.name = name or type(self).__name__
        self._log = get_logger(__name__, trace_id=self.name)
        self._registry = Registry()
        self._lifecycle = LifecycleManager(teardown_policy)

        for action_type, reducer in (reducers or {}).items():
            self.register(action_type, reducer)

    def register(self, action_type: Hashable, reducer: Reducer) -> "Emitter":
        """
        Bind reducer to action_type. The type is usable immediately.

        The reducer receives each ShouldEvent and must return the value it
        overwrote; that value becomes DidEvent.previous_value.

        Raises:
            DuplicateReducerError: If action_type already has a reducer
            TypeError: If reducer is not callable
            RuntimeError: If the emitter was destroyed
        """
        if self._lifecycle.destroyed:
            raise RuntimeError(f"Cannot register action {action_type!r} on a destroyed emitter")

        record = self._registry.bind(action_type, reducer)
        self._lifecycle.track(record.wiring, record.channels.did)
        self._log.debug("registered reducer action=%s", action_type)
        return self

    def dispatch(self, action_type: Hashable, event: ShouldEvent) -> "Emitter":
        """
        Dispatch an action.

        Runs the bound reducer, then notifies did-observers, before returning.

        Returns:
            self, for chaining

        Raises:
            UnregisteredActionError: If action_type has no reducer (nothing is mutated)
        """
        if not self._registry.contains(action_type):
            raise UnregisteredActionError(action_type, "dispatch")

        self._log.debug("dispatch action=%s id=%s", action_type, event.id)
        self._registry.get(action_type).channels.should.publish(event)
        return self

    def on(self, action_type: Hashable) -> Subscribable[DidEvent]:
        """
        Respond to an action (fired after app state has been mutated).

        Returns:
            The did-channel for action_type; subscribe to it as often as needed

        Raises:
            UnregisteredActionError: If action_type has no reducer
        """
        if not self._registry.contains(action_type):
            raise UnregisteredActionError(action_type, "on")
        return self._registry.get(action_type).channels.did

    def destroy(self) -> None:
        """
        Cancel reducer wiring for every registered type. Idempotent.

        Types stay registered: dispatch() and on() still accept them, but
        no reducer runs and no DidEvent is produced.
        """
        if self._lifecycle.destroyed:
            return
        cancelled = self._lifecycle.destroy()
        self._log.debug(
            "destroyed emitter types=%d policy=%s external_cancelled=%d",
            len(self._registry),
            self._lifecycle.policy.value,
            cancelled,
        )

    def is_registered(self, action_type: Hashable) -> bool:
        return self._registry.contains(action_type)

    @property
    def action_types(self) -> List[Hashable]:
        """Registered action types, in registration order."""
        return self._registry.action_types()

    @property
    def destroyed(self) -> bool:
        return self._lifecycle.destroyed

    @property
    def teardown_policy(self) -> TeardownPolicy:
        return self._lifecycle.policy
