"""Union definitions: a union name plus its registered arms.

A definition is built up fluently and then rendered into a constructor::

    ClientType = (
        union("ClientType")
        .of("Success", lambda id: {"id": id})
        .of("Failure", lambda msg: {"error": msg})
        .render()
    )

Arms are free-form callables. Whatever an arm returns becomes the payload of
the tagged value it produces; nothing about arity or shape is checked here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeAlias

from tagunion.config import get_settings
from tagunion.constructor import UnionConstructor
from tagunion.errors import DuplicateArmError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

logger = logging.getLogger(__name__)

ArmConstructor: TypeAlias = Callable[..., Any]


class UnionDefinition:
    """Builder accumulating the arms of one named union.

    Registering an arm name twice replaces the earlier constructor
    (last write wins) unless strict mode is on, in which case
    :class:`DuplicateArmError` is raised.
    """

    def __init__(
        self,
        name: str,
        *,
        strict: bool | None = None,
        log_overwrites: bool | None = None,
    ) -> None:
        self._name = name
        self._arms: dict[str, ArmConstructor] = {}
        if strict is None or log_overwrites is None:
            settings = get_settings()
            if strict is None:
                strict = settings.strict_arms
            if log_overwrites is None:
                log_overwrites = settings.log_overwrites
        self._strict = strict
        self._log_overwrites = log_overwrites

    @classmethod
    def create(cls, name: str, **options: Any) -> UnionDefinition:
        return cls(name, **options)

    @property
    def name(self) -> str:
        return self._name

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def arms(self) -> Mapping[str, ArmConstructor]:
        """Read-only view of the registered arms, in registration order."""
        return MappingProxyType(self._arms)

    @property
    def arm_names(self) -> tuple[str, ...]:
        return tuple(self._arms)

    def of(self, arm_name: str, constructor: ArmConstructor) -> UnionDefinition:
        """Register ``constructor`` under ``arm_name``.

        Args:
            arm_name: Name of the variant
            constructor: Callable producing the variant's payload

        Returns:
            This definition, so registrations can be chained

        Raises:
            DuplicateArmError: If strict mode is on and the arm already exists

        """
        if arm_name in self._arms:
            if self._strict:
                raise DuplicateArmError(self._name, arm_name)
            if self._log_overwrites:
                logger.debug(
                    "Overwriting arm %r of union %r", arm_name, self._name
                )
        self._arms[arm_name] = constructor
        return self

    def render(self) -> UnionConstructor:
        """Turn the registered arms into a constructor for tagged values.

        The arm table is copied, so registering more arms afterwards does not
        change constructors that were already rendered.
        """
        return UnionConstructor.build(self)

    build = render

    def __contains__(self, arm_name: object) -> bool:
        return arm_name in self._arms

    def __iter__(self) -> Iterator[str]:
        return iter(self._arms)

    def __len__(self) -> int:
        return len(self._arms)

    def __repr__(self) -> str:
        arms = ", ".join(self._arms)
        return f"UnionDefinition({self._name!r}, arms=[{arms}])"


def union(name: str, **options: Any) -> UnionDefinition:
    """Start defining a union called ``name``."""
    return UnionDefinition(name, **options)
