"""Error types raised while defining, constructing, and matching unions.

Every error carries the name of the union it concerns. Lookup failures also
subclass the matching builtin (``AttributeError``, ``KeyError``, ...) so the
usual ``hasattr`` / ``dict.get`` style probing keeps working.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

_MAX_ARMS_IN_ERROR = 10  # Maximum number of arm names to show in error messages


def _describe_arms(arms: Iterable[str]) -> str:
    names = list(arms)
    if not names:
        return "none"
    shown = ", ".join(repr(name) for name in names[:_MAX_ARMS_IN_ERROR])
    if len(names) > _MAX_ARMS_IN_ERROR:
        shown += f", ... ({len(names) - _MAX_ARMS_IN_ERROR} more)"
    return shown


class UnionError(Exception):
    """Base class for all union errors."""

    def __init__(self, union_name: str, message: str) -> None:
        super().__init__(message)
        self.union_name = union_name
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.union_name, self.message))


class UnknownArmError(UnionError, AttributeError, KeyError):
    """An arm name was requested that the union never registered."""

    def __init__(
        self,
        union_name: str,
        arm_name: str,
        available: Iterable[str] = (),
    ) -> None:
        self.arm_name = arm_name
        self.available = tuple(available)
        message = (
            f"Union '{union_name}' has no arm '{arm_name}'. "
            f"Registered arms: {_describe_arms(self.available)}"
        )
        super().__init__(union_name, message)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.union_name, self.arm_name, self.available))


class DuplicateArmError(UnionError, ValueError):
    """An arm name was registered twice while strict mode was on."""

    def __init__(self, union_name: str, arm_name: str) -> None:
        self.arm_name = arm_name
        message = (
            f"Arm '{arm_name}' is already registered on union '{union_name}'. "
            "Strict mode forbids overwriting arms."
        )
        super().__init__(union_name, message)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.union_name, self.arm_name))


class UnionMismatchError(UnionError, ValueError):
    """A tagged value belongs to a different union than expected."""

    def __init__(self, union_name: str, actual: str) -> None:
        self.actual = actual
        message = f"Expected a value of union '{union_name}', got one of union '{actual}'"
        super().__init__(union_name, message)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.union_name, self.actual))


class NoMatchError(UnionError, LookupError):
    """No handler applies to the matched value."""

    def __init__(self, union_name: str, arm_name: str) -> None:
        self.arm_name = arm_name
        message = (
            f"No handler for arm '{arm_name}' of union '{union_name}' "
            "and no fallback was given"
        )
        super().__init__(union_name, message)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.union_name, self.arm_name))


class NonExhaustiveMatchError(UnionError, ValueError):
    """A match bound to a union leaves some of its arms unhandled."""

    def __init__(self, union_name: str, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        message = (
            f"Match on union '{union_name}' is not exhaustive. "
            f"Unhandled arms: {_describe_arms(self.missing)}"
        )
        super().__init__(union_name, message)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.union_name, self.missing))
