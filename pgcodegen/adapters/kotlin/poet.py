"""Helpers for building Kotlin AST nodes."""

from __future__ import annotations

from typing import Any

from pgcodegen.adapters.kotlin.ast import Class, Node, NullableType, UserType


def node(value: Any) -> Node:
    """Box an AST variant into a Node envelope.

    Raises:
        TypeError: If value is not a supported variant. The variant set is
            closed, so this is a programming error.
    """
    if isinstance(value, (Class, NullableType, UserType)):
        return Node(node=value)
    raise TypeError(f"unsupported Kotlin AST node: {type(value).__name__}")
