"""PostgreSQL column type to Go type resolution.

Resolution is table driven:
    - TYPE_FAMILY_NAMES groups SQL type names into families
    - STANDARD_TYPES maps families to the identifiers every profile shares
    - EXTENDED_TYPES overrides families for driver profiles with richer types
    - Document families (json, jsonb) additionally branch on nullability

Names that are not built-in fall back to a catalog search for enums and
composite types.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum

from pgcodegen.adapters.golang import types
from pgcodegen.adapters.golang.driver import DriverProfile
from pgcodegen.adapters.golang.naming import struct_name
from pgcodegen.domain.catalog import Catalog
from pgcodegen.domain.column import Column
from pgcodegen.domain.identifier import Identifier, parse_identifier
from pgcodegen.errors import InvalidIdentifierError

logger = logging.getLogger(__name__)

PG_CATALOG_PREFIX = "pg_catalog."


class TypeFamily(str, Enum):
    """Groups of SQL types that share a Go representation."""

    SMALLINT = "smallint"
    INTEGER = "integer"
    BIGINT = "bigint"
    REAL = "real"
    DOUBLE = "double"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    JSON = "json"
    JSONB = "jsonb"
    BYTEA = "bytea"
    DATETIME = "datetime"
    TEXT = "text"
    UUID = "uuid"
    INET = "inet"
    CIDR = "cidr"
    MACADDR = "macaddr"
    LTREE = "ltree"
    INTERVAL = "interval"
    DATERANGE = "daterange"
    TSRANGE = "tsrange"
    TSTZRANGE = "tstzrange"
    NUMRANGE = "numrange"
    INT4RANGE = "int4range"
    INT8RANGE = "int8range"
    HSTORE = "hstore"
    VOID = "void"


# SQL names per family. Each name also matches with a pg_catalog. prefix.
TYPE_FAMILY_NAMES: dict[TypeFamily, tuple[str, ...]] = {
    TypeFamily.SMALLINT: ("smallint", "int2", "smallserial", "serial2"),
    TypeFamily.INTEGER: ("integer", "int", "int4", "serial", "serial4"),
    TypeFamily.BIGINT: ("bigint", "int8", "bigserial", "serial8"),
    TypeFamily.REAL: ("real", "float4"),
    TypeFamily.DOUBLE: ("float", "double precision", "float8"),
    TypeFamily.NUMERIC: ("numeric", "money"),
    TypeFamily.BOOLEAN: ("boolean", "bool"),
    TypeFamily.JSON: ("json",),
    TypeFamily.JSONB: ("jsonb",),
    TypeFamily.BYTEA: ("bytea", "blob"),
    TypeFamily.DATETIME: ("date", "time", "timetz", "timestamp", "timestamptz"),
    TypeFamily.TEXT: ("text", "varchar", "bpchar", "string"),
    TypeFamily.UUID: ("uuid",),
    TypeFamily.INET: ("inet",),
    TypeFamily.CIDR: ("cidr",),
    TypeFamily.MACADDR: ("macaddr", "macaddr8"),
    # https://www.postgresql.org/docs/current/ltree.html
    TypeFamily.LTREE: ("ltree", "lquery", "ltxtquery"),
    TypeFamily.INTERVAL: ("interval",),
    TypeFamily.DATERANGE: ("daterange",),
    TypeFamily.TSRANGE: ("tsrange",),
    TypeFamily.TSTZRANGE: ("tstzrange",),
    TypeFamily.NUMRANGE: ("numrange",),
    TypeFamily.INT4RANGE: ("int4range",),
    TypeFamily.INT8RANGE: ("int8range",),
    TypeFamily.HSTORE: ("hstore",),
    # A void value can only be scanned into an empty interface
    TypeFamily.VOID: ("void", "any"),
}

_FAMILY_BY_NAME: dict[str, TypeFamily] = {
    name: family for family, names in TYPE_FAMILY_NAMES.items() for name in names
}

# Identifiers shared by all profiles. Families missing here fall back to
# DYNAMIC unless an extended profile overrides them.
STANDARD_TYPES: dict[TypeFamily, str] = {
    TypeFamily.SMALLINT: types.INT16,
    TypeFamily.INTEGER: types.INT32,
    TypeFamily.BIGINT: types.INT64,
    TypeFamily.REAL: types.FLOAT32,
    TypeFamily.DOUBLE: types.FLOAT64,
    # The Go standard library has no decimal type, so lib/pq returns
    # numerics as strings. https://github.com/lib/pq/issues/648
    TypeFamily.NUMERIC: types.STRING,
    TypeFamily.BOOLEAN: types.BOOL,
    TypeFamily.BYTEA: types.BYTES,
    TypeFamily.DATETIME: types.TIME,
    TypeFamily.TEXT: types.STRING,
    TypeFamily.UUID: types.UUID,
    TypeFamily.LTREE: types.STRING,
    TypeFamily.INTERVAL: types.INT64,
}

EXTENDED_TYPES: dict[DriverProfile, dict[TypeFamily, str]] = {
    DriverProfile.PGX_V4: {
        TypeFamily.NUMERIC: types.PGTYPE_NUMERIC,
        TypeFamily.JSON: types.PGTYPE_JSON,
        TypeFamily.JSONB: types.PGTYPE_JSONB,
        TypeFamily.INET: types.PGTYPE_INET,
        TypeFamily.CIDR: types.PGTYPE_CIDR,
        TypeFamily.MACADDR: types.PGTYPE_MACADDR,
        TypeFamily.DATERANGE: types.PGTYPE_DATERANGE,
        TypeFamily.TSRANGE: types.PGTYPE_TSRANGE,
        TypeFamily.TSTZRANGE: types.PGTYPE_TSTZRANGE,
        TypeFamily.NUMRANGE: types.PGTYPE_NUMRANGE,
        TypeFamily.INT4RANGE: types.PGTYPE_INT4RANGE,
        TypeFamily.INT8RANGE: types.PGTYPE_INT8RANGE,
        TypeFamily.HSTORE: types.PGTYPE_HSTORE,
    },
}

DOCUMENT_FAMILIES = frozenset({TypeFamily.JSON, TypeFamily.JSONB})


def lookup_family(declared_type: str) -> TypeFamily | None:
    """Find the built-in family for a SQL type name.

    Matching is case-sensitive. ``pg_catalog.X`` matches the same family as ``X``.
    """
    family = _FAMILY_BY_NAME.get(declared_type)
    if family is None and declared_type.startswith(PG_CATALOG_PREFIX):
        family = _FAMILY_BY_NAME.get(declared_type[len(PG_CATALOG_PREFIX) :])
    return family


def builtin_type(
    family: TypeFamily, driver: DriverProfile | None, not_null: bool
) -> str:
    """Resolve a built-in family for a driver profile.

    Args:
        family: Built-in type family
        driver: Active driver profile, or None if no profile is configured
        not_null: Effective nullability (arrays count as not null)

    Returns:
        Go type identifier
    """
    overrides = EXTENDED_TYPES.get(driver) if driver is not None else None
    if overrides and family in overrides:
        return overrides[family]

    if family in DOCUMENT_FAMILIES:
        if driver is None:
            return types.DYNAMIC
        if not_null:
            return types.RAW_MESSAGE
        return types.NULL_RAW_MESSAGE

    return STANDARD_TYPES.get(family, types.DYNAMIC)


def catalog_type(
    catalog: Catalog,
    rel: Identifier,
    not_null: bool,
    rename: Mapping[str, str] | None = None,
) -> str | None:
    """Resolve a user-defined enum or composite type from the catalog.

    An unset schema defaults to the catalog default schema.

    Returns:
        Go type identifier, or None if not found
    """
    rel_schema = rel.schema_name or catalog.default_schema

    for schema in catalog.user_schemas:
        if schema.name != rel_schema:
            continue

        for enum in schema.enums:
            if enum.name == rel.name:
                if schema.name == catalog.default_schema:
                    return struct_name(enum.name, rename)
                return struct_name(f"{schema.name}_{enum.name}", rename)

        for composite in schema.composite_types:
            if composite.name == rel.name:
                if not_null:
                    return types.STRING
                return types.NULL_STRING

    return None


def postgres_type(
    catalog: Catalog,
    column: Column,
    driver: DriverProfile | None = DriverProfile.STANDARD,
    *,
    rename: Mapping[str, str] | None = None,
    debug: bool = False,
) -> str:
    """Choose the Go type for a PostgreSQL column.

    Never raises for unknown types; they resolve to ``interface{}``.

    Args:
        catalog: Catalog to search for enums and composite types
        column: Column descriptor
        driver: Active driver profile, or None if no profile is configured
        rename: Struct name overrides for enum types
        debug: Log columns whose type could not be resolved

    Returns:
        Go type identifier
    """
    declared_type = column.declared_type
    not_null = column.effective_not_null

    family = lookup_family(declared_type)
    if family is not None:
        return builtin_type(family, driver, not_null)

    try:
        rel = parse_identifier(declared_type)
    except InvalidIdentifierError:
        # Malformed names degrade to interface{} instead of aborting generation
        return types.DYNAMIC

    resolved = catalog_type(catalog, rel, not_null, rename)
    if resolved is not None:
        return resolved

    if debug:
        logger.warning("unknown PostgreSQL type: %s", declared_type)
    return types.DYNAMIC
