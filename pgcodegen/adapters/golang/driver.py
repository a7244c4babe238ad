"""Go SQL driver profiles."""

from enum import Enum


class DriverProfile(str, Enum):
    """Driver library conventions a generation run targets."""

    STANDARD = "database/sql"  # lib/pq via database/sql
    PGX_V4 = "pgx/v4"


# Profiles that supply their own representations for numeric, JSON, network,
# range and hstore types
EXTENDED_PROFILES = frozenset({DriverProfile.PGX_V4})


def parse_driver(sql_package: str | None) -> DriverProfile:
    """Select a driver profile from the configured sql_package.

    Unrecognized or empty values select the standard profile.
    """
    if sql_package == DriverProfile.PGX_V4.value:
        return DriverProfile.PGX_V4
    return DriverProfile.STANDARD
