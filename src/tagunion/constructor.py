"""Dispatch from arm names to tagged-value constructors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tagunion.errors import UnknownArmError
from tagunion.values import TaggedValue

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from tagunion.definition import ArmConstructor, UnionDefinition


class Arm:
    """A single arm of a rendered union, callable to build tagged values."""

    __slots__ = ("arm_name", "constructor", "union_name")

    def __init__(
        self, union_name: str, arm_name: str, constructor: ArmConstructor
    ) -> None:
        self.union_name = union_name
        self.arm_name = arm_name
        self.constructor = constructor

    def __call__(self, *args: Any, **kwargs: Any) -> TaggedValue:
        return TaggedValue(
            self.union_name, self.arm_name, self.constructor(*args, **kwargs)
        )

    def __repr__(self) -> str:
        return f"<arm {self.union_name}.{self.arm_name}>"


class UnionConstructor:
    """Constructs the variants of one union.

    Each registered arm is reachable three ways, all producing the same
    :class:`TaggedValue`::

        ClientType.invoke("Success", 42)
        ClientType.Success(42)
        ClientType["Success"](42)

    Arms whose names collide with members of this class (``invoke``,
    ``name``, ...) are only reachable through ``invoke`` or indexing.
    """

    __slots__ = ("_arms", "_name")

    def __init__(self, name: str, arms: Mapping[str, ArmConstructor]) -> None:
        self._name = name
        self._arms: dict[str, ArmConstructor] = dict(arms)

    @classmethod
    def build(cls, definition: UnionDefinition) -> UnionConstructor:
        """Capture a definition's name and a copy of its arm table."""
        return cls(definition.name, definition.arms)

    @property
    def name(self) -> str:
        return self._name

    @property
    def arm_names(self) -> tuple[str, ...]:
        return tuple(self._arms)

    def invoke(self, arm_name: str, /, *args: Any, **kwargs: Any) -> TaggedValue:
        """Build a value of arm ``arm_name`` from the given arguments.

        Arguments are passed to the arm's constructor unchanged, and anything
        it raises propagates to the caller.

        Raises:
            UnknownArmError: If the union has no arm called ``arm_name``

        """
        return self.arm(arm_name)(*args, **kwargs)

    def arm(self, arm_name: str) -> Arm:
        """Look up the callable for ``arm_name``."""
        try:
            constructor = self._arms[arm_name]
        except KeyError:
            raise UnknownArmError(self._name, arm_name, self._arms) from None
        return Arm(self._name, arm_name, constructor)

    def is_variant(self, value: object, arm_name: str | None = None) -> bool:
        """Check whether ``value`` was built by this union (and arm, if given)."""
        if not isinstance(value, TaggedValue) or value.union_name != self._name:
            return False
        if value.arm_name not in self._arms:
            return False
        return arm_name is None or value.arm_name == arm_name

    def __getattr__(self, attr: str) -> Arm:
        # Only called when normal lookup fails, so class members win.
        if attr.startswith("__") or attr in UnionConstructor.__slots__:
            raise AttributeError(attr)
        return self.arm(attr)

    def __getitem__(self, arm_name: str) -> Arm:
        return self.arm(arm_name)

    def __contains__(self, arm_name: object) -> bool:
        return arm_name in self._arms

    def __iter__(self) -> Iterator[str]:
        return iter(self._arms)

    def __len__(self) -> int:
        return len(self._arms)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._arms))

    def __repr__(self) -> str:
        arms = " | ".join(self._arms)
        return f"<union {self._name} = {arms}>"
