"""Adapters - target-language type resolution and AST helpers."""
