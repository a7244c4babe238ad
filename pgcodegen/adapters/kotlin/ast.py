"""Kotlin AST node variants.

Each variant carries a ``kind`` tag so a boxed Node can be serialized and
validated back into the right variant.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class UserType(BaseModel):
    """A reference to a named type, e.g. ``java.time.OffsetDateTime``."""

    kind: Literal["user_type"] = "user_type"
    name: str
    package: str | None = None

    model_config = {"frozen": True}

    @property
    def qualified_name(self) -> str:
        if self.package:
            return f"{self.package}.{self.name}"
        return self.name


class NullableType(BaseModel):
    """A nullable wrapper, rendered as ``T?``."""

    kind: Literal["nullable_type"] = "nullable_type"
    inner: UserType

    model_config = {"frozen": True}


class Class(BaseModel):
    """A class declaration."""

    kind: Literal["class"] = "class"
    name: str
    data: bool = False
    properties: list[tuple[str, UserType | NullableType]] = Field(default_factory=list)

    model_config = {"frozen": True}


NodeVariant = Annotated[
    Union[Class, NullableType, UserType], Field(discriminator="kind")
]


class Node(BaseModel):
    """Tagged envelope around exactly one AST variant."""

    node: NodeVariant

    model_config = {"frozen": True}

    @property
    def kind(self) -> str:
        return self.node.kind
