"""tagunion - Tagged unions built at runtime for Python 3.12+."""

from tagunion.config import (
    UnionSettings,
    get_settings,
)
from tagunion.constructor import (
    Arm,
    UnionConstructor,
)
from tagunion.definition import (
    ArmConstructor,
    UnionDefinition,
    union,
)
from tagunion.errors import (
    DuplicateArmError,
    NoMatchError,
    NonExhaustiveMatchError,
    UnionError,
    UnionMismatchError,
    UnknownArmError,
)
from tagunion.match import (
    Match,
    match,
)
from tagunion.schema import (
    ArmSchema,
    ParameterSchema,
    UnionSchema,
    union_schema,
)
from tagunion.serialization import (
    from_dict,
    from_json,
    to_dict,
    to_json,
)
from tagunion.values import TaggedValue

__all__ = [
    # Core types
    "Arm",
    "ArmConstructor",
    # Schema extraction
    "ArmSchema",
    # Errors
    "DuplicateArmError",
    # Matching
    "Match",
    "NoMatchError",
    "NonExhaustiveMatchError",
    "ParameterSchema",
    "TaggedValue",
    "UnionConstructor",
    "UnionDefinition",
    "UnionError",
    "UnionMismatchError",
    "UnionSchema",
    # Configuration
    "UnionSettings",
    "UnknownArmError",
    # Serialization
    "from_dict",
    "from_json",
    "get_settings",
    "match",
    "to_dict",
    "to_json",
    "union",
    "union_schema",
]
