"""Introspection of union arms and their constructor signatures."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tagunion.constructor import UnionConstructor

if TYPE_CHECKING:
    from collections.abc import Callable

    from tagunion.definition import UnionDefinition


@dataclass(frozen=True)
class ParameterSchema:
    """One parameter of an arm constructor."""

    name: str
    kind: str  # inspect.Parameter kind name, e.g. "POSITIONAL_OR_KEYWORD"
    has_default: bool


@dataclass(frozen=True)
class ArmSchema:
    """Schema for a single arm.

    ``parameters`` is None when the constructor's signature cannot be
    inspected, which happens for some builtins.
    """

    name: str
    parameters: tuple[ParameterSchema, ...] | None

    def to_dict(self) -> dict[str, Any]:
        if self.parameters is None:
            return {"name": self.name, "parameters": None}
        return {
            "name": self.name,
            "parameters": [
                {"name": p.name, "kind": p.kind, "has_default": p.has_default}
                for p in self.parameters
            ],
        }


@dataclass(frozen=True)
class UnionSchema:
    """Complete schema for a union."""

    name: str
    arms: tuple[ArmSchema, ...]

    def arm(self, name: str) -> ArmSchema:
        for arm in self.arms:
            if arm.name == name:
                return arm
        msg = f"Union '{self.name}' has no arm '{name}'"
        raise KeyError(msg)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "arms": [arm.to_dict() for arm in self.arms]}


def _parameters(constructor: Callable[..., Any]) -> tuple[ParameterSchema, ...] | None:
    try:
        signature = inspect.signature(constructor)
    except (TypeError, ValueError):
        return None
    return tuple(
        ParameterSchema(
            name=param.name,
            kind=param.kind.name,
            has_default=param.default is not inspect.Parameter.empty,
        )
        for param in signature.parameters.values()
    )


def arm_schema(name: str, constructor: Callable[..., Any]) -> ArmSchema:
    return ArmSchema(name=name, parameters=_parameters(constructor))


def union_schema(source: UnionDefinition | UnionConstructor) -> UnionSchema:
    """Extract the schema of a union definition or rendered constructor."""
    if isinstance(source, UnionConstructor):
        arms = {name: source.arm(name).constructor for name in source}
    else:
        arms = dict(source.arms)
    return UnionSchema(
        name=source.name,
        arms=tuple(arm_schema(name, fn) for name, fn in arms.items()),
    )
