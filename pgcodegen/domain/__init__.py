"""Domain layer - catalog primitives and identifiers.

This layer contains target-agnostic database concepts:
- Catalogs, schemas, tables, enums, composite types
- Column descriptors
- Qualified identifiers

Go-specific concepts (driver profiles, type spellings, struct names) belong
in adapters/golang/, not here.
"""

from pgcodegen.domain.catalog import (
    PG_CATALOG,
    Catalog,
    CompositeType,
    EnumType,
    Schema,
    Table,
)
from pgcodegen.domain.column import Column
from pgcodegen.domain.identifier import Identifier, data_type, parse_identifier

__all__ = [
    # Catalog
    "PG_CATALOG",
    "Catalog",
    "CompositeType",
    "EnumType",
    "Schema",
    "Table",
    # Column
    "Column",
    # Identifier
    "Identifier",
    "data_type",
    "parse_identifier",
]
