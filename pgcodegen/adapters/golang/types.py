"""Go type identifiers emitted into generated source.

These spellings are inserted verbatim into generated Go code, so they must
match the packages the generated code imports.
"""

# =============================================================================
# Primitives
# =============================================================================

INT16 = "int16"
INT32 = "int32"
INT64 = "int64"
FLOAT32 = "float32"
FLOAT64 = "float64"
BOOL = "bool"
STRING = "string"
BYTES = "[]byte"
TIME = "time.Time"
UUID = "uuid.UUID"

# =============================================================================
# Nullable and document variants (database/sql, lib/pq, pqtype)
# =============================================================================

NULL_STRING = "sql.NullString"
RAW_MESSAGE = "json.RawMessage"
NULL_RAW_MESSAGE = "pqtype.NullRawMessage"

# =============================================================================
# pgx/v4 pgtype identifiers
# =============================================================================

PGTYPE_NUMERIC = "pgtype.Numeric"
PGTYPE_JSON = "pgtype.JSON"
PGTYPE_JSONB = "pgtype.JSONB"
PGTYPE_INET = "pgtype.Inet"
PGTYPE_CIDR = "pgtype.CIDR"
PGTYPE_MACADDR = "pgtype.Macaddr"
PGTYPE_DATERANGE = "pgtype.Daterange"
PGTYPE_TSRANGE = "pgtype.Tsrange"
PGTYPE_TSTZRANGE = "pgtype.Tstzrange"
PGTYPE_NUMRANGE = "pgtype.Numrange"
PGTYPE_INT4RANGE = "pgtype.Int4range"
PGTYPE_INT8RANGE = "pgtype.Int8range"
PGTYPE_HSTORE = "pgtype.Hstore"

# =============================================================================
# Fallback
# =============================================================================

# Used when no specific representation applies
DYNAMIC = "interface{}"
