"""Tests for Kotlin AST node boxing."""

import pytest

from pgcodegen.adapters.kotlin import Class, Node, NullableType, UserType, node


class TestNode:
    """Tests for node()."""

    def test_box_class(self) -> None:
        cls = Class(name="Author", data=True)
        boxed = node(cls)

        assert isinstance(boxed, Node)
        assert boxed.kind == "class"
        assert boxed.node is cls

    def test_box_nullable_type(self) -> None:
        nullable = NullableType(inner=UserType(name="String"))
        boxed = node(nullable)

        assert boxed.kind == "nullable_type"
        assert boxed.node.inner.name == "String"

    def test_box_user_type(self) -> None:
        boxed = node(UserType(name="OffsetDateTime", package="java.time"))

        assert boxed.kind == "user_type"
        assert boxed.node.qualified_name == "java.time.OffsetDateTime"

    @pytest.mark.parametrize("value", ["Author", 42, None, {"kind": "class"}])
    def test_unsupported_variant_raises(self, value: object) -> None:
        with pytest.raises(TypeError, match="unsupported Kotlin AST node"):
            node(value)

    def test_envelope_round_trip_keeps_variant(self) -> None:
        boxed = node(
            Class(
                name="Author",
                properties=[
                    ("id", UserType(name="Long")),
                    ("bio", NullableType(inner=UserType(name="String"))),
                ],
            )
        )

        restored = Node.model_validate(boxed.model_dump())

        assert restored == boxed
        assert isinstance(restored.node, Class)
        assert isinstance(restored.node.properties[1][1], NullableType)
