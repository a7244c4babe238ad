"""Go adapter - PostgreSQL to Go type resolution.

Public API:
    - postgres_type: Resolve a column to a Go type identifier
    - DriverProfile / parse_driver: Driver profile selection
    - struct_name: Go struct naming for derived enum types
"""

from pgcodegen.adapters.golang.driver import DriverProfile, parse_driver
from pgcodegen.adapters.golang.naming import struct_name
from pgcodegen.adapters.golang.postgresql_type import (
    TypeFamily,
    lookup_family,
    postgres_type,
)

__all__ = [
    "DriverProfile",
    "TypeFamily",
    "lookup_family",
    "parse_driver",
    "postgres_type",
    "struct_name",
]
