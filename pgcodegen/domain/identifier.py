"""Qualified identifiers - dotted catalog.schema.name references."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pgcodegen.errors import InvalidIdentifierError


class Identifier(BaseModel):
    """
    A possibly qualified relation or type name.

    Supports 1-part (name), 2-part (schema.name) or 3-part
    (catalog.schema.name) naming.
    """

    catalog: str | None = None
    schema_name: str | None = Field(None, alias="schema")  # 'schema' is reserved in Pydantic
    name: str

    model_config = {"frozen": True, "populate_by_name": True}

    def __str__(self) -> str:
        parts = [p for p in [self.catalog, self.schema_name, self.name] if p]
        return ".".join(parts)


def parse_identifier(name: str) -> Identifier:
    """Split a dotted name into an Identifier.

    Args:
        name: Name such as ``status``, ``billing.status`` or
            ``db.billing.status``

    Returns:
        Identifier with catalog and schema set according to the number of parts

    Raises:
        InvalidIdentifierError: If the name is empty or has more than three parts

    Examples:
        >>> parse_identifier("a.b.c")
        Identifier(catalog='a', schema_name='b', name='c')
    """
    parts = name.split(".") if name else []

    if len(parts) == 1:
        return Identifier(name=parts[0])
    if len(parts) == 2:
        return Identifier(schema=parts[0], name=parts[1])
    if len(parts) == 3:
        return Identifier(catalog=parts[0], schema=parts[1], name=parts[2])

    raise InvalidIdentifierError(name)


def data_type(identifier: Identifier) -> str:
    """Render an identifier as the ``schema.name`` type string the resolver matches."""
    if identifier.schema_name:
        return f"{identifier.schema_name}.{identifier.name}"
    return identifier.name
