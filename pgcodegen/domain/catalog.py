"""Catalog domain - schemas and the user-defined types they contain."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pgcodegen.domain.column import Column

# Built-in system schema; never searched for user-defined types
PG_CATALOG = "pg_catalog"


class EnumType(BaseModel):
    """A user-defined enum type."""

    name: str
    vals: list[str] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "forbid"}


class CompositeType(BaseModel):
    """A user-defined composite (row) type."""

    name: str

    model_config = {"frozen": True, "extra": "forbid"}


class Table(BaseModel):
    """A table and its columns, in declaration order."""

    name: str
    columns: list[Column] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "forbid"}


class Schema(BaseModel):
    """A namespace of tables, enums and composite types."""

    name: str
    enums: list[EnumType] = Field(default_factory=list)
    composite_types: list[CompositeType] = Field(default_factory=list)
    tables: list[Table] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def is_system(self) -> bool:
        return self.name == PG_CATALOG


class Catalog(BaseModel):
    """
    The full set of known schemas for a database.

    Schema order is significant: lookups scan schemas in the stored order and
    the first match wins.
    """

    default_schema: str = "public"
    schemas: list[Schema] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "forbid"}

    def get_schema(self, name: str) -> Schema | None:
        """Get a schema by name if it exists."""
        for schema in self.schemas:
            if schema.name == name:
                return schema
        return None

    @property
    def user_schemas(self) -> list[Schema]:
        """Schemas other than pg_catalog, in stored order."""
        return [s for s in self.schemas if not s.is_system]
