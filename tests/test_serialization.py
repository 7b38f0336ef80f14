"""Tests for tagunion.serialization module."""

import json

import pytest

from tagunion.constructor import UnionConstructor
from tagunion.definition import union
from tagunion.errors import UnionMismatchError, UnknownArmError
from tagunion.serialization import from_dict, from_json, to_dict, to_json
from tagunion.values import TaggedValue


@pytest.fixture
def client_type() -> UnionConstructor:
    return (
        union("ClientType")
        .of("Success", lambda id: {"id": id})
        .of("Failure", lambda msg: {"error": msg})
        .render()
    )


class TestToDict:
    def test_tagged_value_to_dict(self, client_type: UnionConstructor) -> None:
        """Test serializing a tagged value to a dictionary."""
        assert to_dict(client_type.Success(42)) == {
            "union": "ClientType",
            "arm": "Success",
            "payload": {"id": 42},
        }

    def test_rejects_plain_tuple(self) -> None:
        with pytest.raises(ValueError, match="Cannot serialize object of type tuple"):
            to_dict(("U", "A", 1))  # type: ignore[arg-type]


class TestFromDict:
    def test_round_trip(self, client_type: UnionConstructor) -> None:
        value = client_type.Failure("timeout")
        assert from_dict(to_dict(value), client_type) == value

    def test_does_not_rerun_constructor(self) -> None:
        """Test that the stored payload is used as-is."""
        calls: list[int] = []

        def record(x: int) -> int:
            calls.append(x)
            return x

        u = union("U").of("A", record).render()
        value = from_dict({"union": "U", "arm": "A", "payload": 5}, u)
        assert value == TaggedValue("U", "A", 5)
        assert calls == []

    @pytest.mark.parametrize("missing", ["union", "arm", "payload"])
    def test_missing_key(self, client_type: UnionConstructor, missing: str) -> None:
        data = {"union": "ClientType", "arm": "Success", "payload": {"id": 1}}
        del data[missing]
        with pytest.raises(KeyError, match=missing):
            from_dict(data, client_type)

    def test_foreign_union(self, client_type: UnionConstructor) -> None:
        with pytest.raises(UnionMismatchError) as exc_info:
            from_dict({"union": "Other", "arm": "Success", "payload": 1}, client_type)
        assert exc_info.value.actual == "Other"

    def test_unknown_arm(self, client_type: UnionConstructor) -> None:
        with pytest.raises(UnknownArmError):
            from_dict({"union": "ClientType", "arm": "Pending", "payload": 1}, client_type)

    def test_non_string_arm(self, client_type: UnionConstructor) -> None:
        """Test that an unhashable arm value is reported as an unknown arm."""
        with pytest.raises(UnknownArmError):
            from_dict({"union": "ClientType", "arm": ["Success"], "payload": 1}, client_type)


class TestJson:
    def test_to_json(self, client_type: UnionConstructor) -> None:
        """Test that JSON output matches the dictionary form."""
        value = client_type.Success(42)
        assert json.loads(to_json(value)) == to_dict(value)

    def test_compact(self, client_type: UnionConstructor) -> None:
        assert "\n" not in to_json(client_type.Success(1), indent=None)

    def test_from_json(self, client_type: UnionConstructor) -> None:
        value = client_type.Failure("timeout")
        assert from_json(to_json(value), client_type) == value

    def test_from_json_rejects_non_object(self, client_type: UnionConstructor) -> None:
        with pytest.raises(ValueError, match="Expected JSON object"):
            from_json("[1, 2, 3]", client_type)
