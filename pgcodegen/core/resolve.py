"""Batch resolution of every column in a catalog.

This module resolves all table columns in one pass, for reporting and for
code generation drivers that need the full column-to-type mapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from pgcodegen.adapters.golang import types
from pgcodegen.adapters.golang.driver import DriverProfile
from pgcodegen.adapters.golang.postgresql_type import postgres_type
from pgcodegen.domain.catalog import Catalog


@dataclass
class ResolveStatistics:
    """Statistics collected during a resolution run."""

    schemas: int = 0
    tables: int = 0
    columns: int = 0
    dynamic: int = 0  # Columns that fell back to interface{}


@dataclass(frozen=True)
class ResolvedColumn:
    """A table column and the Go type chosen for it."""

    schema_name: str
    table: str
    column: str
    declared_type: str
    go_type: str

    @property
    def is_dynamic(self) -> bool:
        return self.go_type == types.DYNAMIC


@dataclass
class ResolveResult:
    """Resolved columns in catalog order plus run statistics."""

    columns: list[ResolvedColumn] = field(default_factory=list)
    stats: ResolveStatistics = field(default_factory=ResolveStatistics)

    @property
    def unresolved(self) -> list[ResolvedColumn]:
        return [c for c in self.columns if c.is_dynamic]


def resolve_catalog(
    catalog: Catalog,
    driver: DriverProfile | None = DriverProfile.STANDARD,
    *,
    rename: Mapping[str, str] | None = None,
    debug: bool = False,
) -> ResolveResult:
    """Resolve the Go type of every table column in the catalog.

    Schemas, tables and columns are visited in stored order; pg_catalog is skipped.

    Args:
        catalog: Catalog providing tables and user-defined types
        driver: Active driver profile
        rename: Struct name overrides for enum types
        debug: Log columns whose type could not be resolved

    Returns:
        ResolveResult with one entry per column
    """
    result = ResolveResult()

    for schema in catalog.user_schemas:
        result.stats.schemas += 1
        for table in schema.tables:
            result.stats.tables += 1
            for column in table.columns:
                go_type = postgres_type(
                    catalog, column, driver, rename=rename, debug=debug
                )
                result.columns.append(
                    ResolvedColumn(
                        schema_name=schema.name,
                        table=table.name,
                        column=column.name,
                        declared_type=column.declared_type,
                        go_type=go_type,
                    )
                )
                result.stats.columns += 1
                if go_type == types.DYNAMIC:
                    result.stats.dynamic += 1

    return result
