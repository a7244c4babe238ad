"""Shared catalog fixtures."""

import pytest

from pgcodegen.domain import Catalog, Column, CompositeType, EnumType, Schema, Table


@pytest.fixture
def catalog() -> Catalog:
    """Catalog with enums and composites in default and non-default schemas."""
    return Catalog(
        default_schema="public",
        schemas=[
            Schema(
                name="pg_catalog",
                enums=[EnumType(name="mood")],
                composite_types=[CompositeType(name="point3d")],
            ),
            Schema(
                name="public",
                enums=[EnumType(name="status", vals=["open", "closed"])],
                composite_types=[CompositeType(name="address")],
                tables=[
                    Table(
                        name="orders",
                        columns=[
                            Column(name="id", type="bigserial", not_null=True),
                            Column(name="status", type="status", not_null=True),
                            Column(name="payload", type="jsonb"),
                            Column(name="shipping", type="address"),
                            Column(name="weird", type="frobnicate"),
                        ],
                    )
                ],
            ),
            Schema(
                name="billing",
                enums=[EnumType(name="status", vals=["due", "paid"])],
                tables=[
                    Table(
                        name="invoices",
                        columns=[
                            Column(name="id", type="uuid", not_null=True),
                            Column(name="state", type="billing.status"),
                            Column(name="amount", type="numeric", not_null=True),
                        ],
                    )
                ],
            ),
        ],
    )


@pytest.fixture
def empty_catalog() -> Catalog:
    return Catalog()
