"""Kotlin adapter - AST node variants and boxing."""

from pgcodegen.adapters.kotlin.ast import Class, Node, NullableType, UserType
from pgcodegen.adapters.kotlin.poet import node

__all__ = ["Class", "Node", "NullableType", "UserType", "node"]
