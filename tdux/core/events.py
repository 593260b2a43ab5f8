"""
Event model for the two-phase dispatch.

A ShouldEvent carries the proposed value for one entity. The reducer
bound to its action type applies it and reports the value it replaced,
which is published as a DidEvent.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, TypeVar

T = TypeVar("T")
ID = TypeVar("ID", bound=Hashable)


@dataclass(frozen=True)
class ShouldEvent(Generic[T, ID]):
    """
    Intent to mutate.

    Fields:
        id: Entity id the action should be applied to
        value: New value
    """
    id: ID
    value: T


@dataclass(frozen=True)
class DidEvent(ShouldEvent[T, ID]):
    """
    Mutation completed.

    Fields:
        previous_value: Value replaced by the mutation (the reducer's return)
    """
    previous_value: T

    @classmethod
    def from_should(cls, event: ShouldEvent[T, ID], previous_value: T) -> "DidEvent[T, ID]":
        return cls(id=event.id, value=event.value, previous_value=previous_value)


# Reducer signature: (should_event) -> value that was overwritten
Reducer = Callable[[ShouldEvent], Any]
