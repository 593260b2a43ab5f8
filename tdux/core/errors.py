"""
Exception types for the action dispatcher.
"""

from typing import Hashable


class TduxError(Exception):
    """Base class for dispatcher errors."""
    pass


class UnregisteredActionError(TduxError, LookupError):
    """Raised when dispatching or observing an action type with no reducer."""

    def __init__(self, action_type: Hashable, operation: str) -> None:
        self.action_type = action_type
        self.operation = operation
        super().__init__(
            f'You must define a reducer for action "{action_type}" '
            f"before you call #{operation} on it."
        )


class DuplicateReducerError(TduxError, ValueError):
    """Raised when a second reducer is registered for the same action type."""

    def __init__(self, action_type: Hashable) -> None:
        self.action_type = action_type
        super().__init__(
            f'A reducer is already defined for action "{action_type}". '
            "You cannot define more than 1 reducer per action type."
        )
