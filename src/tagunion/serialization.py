"""Conversion of tagged values to and from builtins and JSON."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from tagunion.errors import UnionMismatchError, UnknownArmError
from tagunion.values import TaggedValue

if TYPE_CHECKING:
    from tagunion.constructor import UnionConstructor

_REQUIRED_KEYS = ("union", "arm", "payload")


def to_dict(value: TaggedValue) -> dict[str, Any]:
    """Serialize a tagged value to a dictionary.

    The payload is stored as-is; it is up to the caller to make sure it can
    be encoded by whatever format comes next.

    Raises:
        ValueError: If ``value`` is not a TaggedValue

    """
    if not isinstance(value, TaggedValue):
        msg = f"Cannot serialize object of type {type(value).__name__}"
        raise ValueError(msg)
    return {"union": value.union_name, "arm": value.arm_name, "payload": value.payload}


def from_dict(data: dict[str, Any], constructor: UnionConstructor) -> TaggedValue:
    """Rebuild a tagged value of ``constructor``'s union from a dictionary.

    The arm constructor is not re-run: the stored payload is trusted.

    Raises:
        KeyError: If a required key is missing
        UnionMismatchError: If the data names a different union
        UnknownArmError: If the arm is not a string naming one of the union's
            arms

    """
    for key in _REQUIRED_KEYS:
        if key not in data:
            msg = f"Missing required key '{key}' in tagged value data"
            raise KeyError(msg)

    if data["union"] != constructor.name:
        raise UnionMismatchError(constructor.name, data["union"])
    if not isinstance(data["arm"], str) or data["arm"] not in constructor:
        raise UnknownArmError(constructor.name, data["arm"], constructor.arm_names)
    return TaggedValue(data["union"], data["arm"], data["payload"])


def to_json(value: TaggedValue, *, indent: int | None = 2) -> str:
    return json.dumps(to_dict(value), indent=indent)


def from_json(s: str, constructor: UnionConstructor) -> TaggedValue:
    """Deserialize a JSON string produced by :func:`to_json`."""
    data = json.loads(s)
    if not isinstance(data, dict):
        msg = "Expected JSON object with 'union', 'arm' and 'payload' fields"
        raise ValueError(msg)
    return from_dict(data, constructor)
