"""Branching on tagged values by arm name.

    message = (
        match(result, union=ClientType)
        .on("Success", lambda payload: f"got {payload['id']}")
        .on("Failure", lambda payload: payload["error"])
        .result()
    )

Handlers registered with ``on`` receive the payload; the ``otherwise``
fallback receives the whole tagged value. Binding the match to a union makes
it check that every arm is handled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tagunion.errors import (
    NoMatchError,
    NonExhaustiveMatchError,
    UnionMismatchError,
    UnknownArmError,
)
from tagunion.values import TaggedValue

if TYPE_CHECKING:
    from collections.abc import Callable

    from tagunion.constructor import UnionConstructor


class Match:
    """Handlers collected for a single tagged value."""

    def __init__(
        self, value: TaggedValue, union: UnionConstructor | None = None
    ) -> None:
        if not isinstance(value, TaggedValue):
            msg = f"Can only match tagged values, got {type(value).__name__}"
            raise TypeError(msg)
        if union is not None and value.union_name != union.name:
            raise UnionMismatchError(union.name, value.union_name)
        self.value = value
        self.union = union
        self._handlers: dict[str, Callable[[Any], Any]] = {}
        self._fallback: Callable[[TaggedValue], Any] | None = None

    def on(self, arm_name: str, handler: Callable[[Any], Any]) -> Match:
        """Handle arm ``arm_name`` with ``handler(payload)``."""
        if self.union is not None and arm_name not in self.union:
            raise UnknownArmError(self.union.name, arm_name, self.union.arm_names)
        if arm_name in self._handlers:
            msg = f"Arm '{arm_name}' already has a handler in this match"
            raise ValueError(msg)
        self._handlers[arm_name] = handler
        return self

    def otherwise(self, handler: Callable[[TaggedValue], Any]) -> Match:
        self._fallback = handler
        return self

    def missing(self) -> tuple[str, ...]:
        """Arms of the bound union that have no handler."""
        if self.union is None:
            return ()
        return tuple(arm for arm in self.union if arm not in self._handlers)

    def result(self) -> Any:
        """Run the handler for the value's arm and return what it returns.

        Raises:
            NonExhaustiveMatchError: If bound to a union, some arms are
                unhandled, and there is no fallback
            NoMatchError: If no handler applies to the value

        """
        if self._fallback is None and (missing := self.missing()):
            raise NonExhaustiveMatchError(self.value.union_name, missing)

        handler = self._handlers.get(self.value.arm_name)
        if handler is not None:
            return handler(self.value.payload)
        if self._fallback is not None:
            return self._fallback(self.value)
        raise NoMatchError(self.value.union_name, self.value.arm_name)


def match(value: TaggedValue, *, union: UnionConstructor | None = None) -> Match:
    """Start matching on ``value``."""
    return Match(value, union)
