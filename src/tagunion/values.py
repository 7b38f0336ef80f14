"""Tagged values produced by union constructors."""

from __future__ import annotations

from typing import Any, NamedTuple


class TaggedValue(NamedTuple):
    """A constructed union variant: ``(union_name, arm_name, payload)``.

    Being a tuple, a tagged value unpacks and compares like the plain triple::

        union_name, arm_name, payload = ClientType.Success(42)

    """

    union_name: str
    arm_name: str
    payload: Any

    @property
    def tag(self) -> tuple[str, str]:
        """The ``(union_name, arm_name)`` discriminant pair."""
        return (self.union_name, self.arm_name)

    def is_arm(self, arm_name: str) -> bool:
        return self.arm_name == arm_name

    def __repr__(self) -> str:
        return f"{self.union_name}.{self.arm_name}({self.payload!r})"
