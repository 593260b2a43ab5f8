"""
Registry: action type -> channel pair + reducer wiring.

Binding a type creates its should/did channels and subscribes the reducer
to the should-channel. Each published ShouldEvent runs the reducer and
forwards a DidEvent carrying the reducer's return value as previous_value.
"""

from dataclasses import dataclass
from typing import Dict, Hashable, Iterator, List

from .channel import Channel, Subscription
from .errors import DuplicateReducerError
from .events import DidEvent, Reducer, ShouldEvent


@dataclass(frozen=True)
class ChannelPair:
    """
    Channels for one action type. Created once, never replaced.

    Fields:
        should: Carries ShouldEvent into the reducer
        did: Carries DidEvent out to observers
    """
    should: Channel
    did: Channel


@dataclass(frozen=True)
class RegistrationRecord:
    """
    Association of an action type with its channels and reducer wiring.

    Fields:
        action_type: Registered key
        channels: ChannelPair for the type
        wiring: Internal should -> did subscription
    """
    action_type: Hashable
    channels: ChannelPair
    wiring: Subscription


def _wire(channels: ChannelPair, reducer: Reducer) -> Subscription:
    def forward(event: ShouldEvent) -> None:
        previous_value = reducer(event)
        channels.did.publish(DidEvent.from_should(event, previous_value))

    return channels.should.subscribe(forward)


class Registry:
    """
    Mapping of action type to RegistrationRecord.

    Usage:
        registry = Registry()
        record = registry.bind("OPEN", open_reducer)
        registry.get("OPEN").channels.should.publish(ShouldEvent(id=1, value=True))
    """

    def __init__(self) -> None:
        self._records: Dict[Hashable, RegistrationRecord] = {}

    def bind(self, action_type: Hashable, reducer: Reducer) -> RegistrationRecord:
        """
        Register reducer for action_type.

        Does not invoke the reducer.

        Args:
            action_type: Hashable action key
            reducer: Callable (ShouldEvent) -> previous value

        Returns:
            The new RegistrationRecord

        Raises:
            DuplicateReducerError: If action_type is already bound
            TypeError: If reducer is not callable
        """
        if action_type in self._records:
            raise DuplicateReducerError(action_type)
        if not callable(reducer):
            raise TypeError(
                f'Reducer for action "{action_type}" must be callable, '
                f"got {type(reducer).__name__}"
            )

        channels = ChannelPair(should=Channel(), did=Channel())
        record = RegistrationRecord(
            action_type=action_type,
            channels=channels,
            wiring=_wire(channels, reducer),
        )
        self._records[action_type] = record
        return record

    def get(self, action_type: Hashable) -> RegistrationRecord:
        """
        Get record by action type.

        Raises:
            KeyError: If action_type is not bound
        """
        return self._records[action_type]

    def contains(self, action_type: Hashable) -> bool:
        try:
            return action_type in self._records
        except TypeError:
            # unhashable keys can never be registered
            return False

    def action_types(self) -> List[Hashable]:
        """Registered types, in registration order."""
        return list(self._records)

    def records(self) -> Iterator[RegistrationRecord]:
        return iter(list(self._records.values()))

    def __len__(self) -> int:
        return len(self._records)
