"""End-to-end tests through the public package API."""

import tagunion
from tagunion import TaggedValue, match, union, union_schema


class TestClientTypeScenario:
    """Define, construct, match, and serialize one union."""

    def test_full_workflow(self) -> None:
        client_type = (
            union("ClientType")
            .of("Success", lambda id: {"id": id})
            .of("Failure", lambda msg: {"error": msg})
            .render()
        )

        results = [client_type.Success(42), client_type.Failure("timeout")]
        assert results == [
            ("ClientType", "Success", {"id": 42}),
            ("ClientType", "Failure", {"error": "timeout"}),
        ]

        ids = [
            match(result, union=client_type)
            .on("Success", lambda payload: payload["id"])
            .on("Failure", lambda payload: None)
            .result()
            for result in results
        ]
        assert ids == [42, None]

        restored = [
            tagunion.from_json(tagunion.to_json(r), client_type) for r in results
        ]
        assert restored == results
        assert all(isinstance(r, TaggedValue) for r in restored)

    def test_user_type(self) -> None:
        """Test a union whose arms carry several fields."""
        user_type = (
            union("User")
            .of("Admin", lambda id, name: {"id": id, "name": name})
            .of("EndUser", lambda name: [name])
            .render()
        )
        union_name, arm_name, payload = user_type.Admin(1, "root")
        assert (union_name, arm_name) == ("User", "Admin")
        assert payload == {"id": 1, "name": "root"}
        assert user_type.EndUser("bob").payload == ["bob"]

        schema = union_schema(user_type)
        assert [p.name for p in schema.arm("Admin").parameters or ()] == ["id", "name"]

    def test_public_names(self) -> None:
        for name in tagunion.__all__:
            assert hasattr(tagunion, name)
