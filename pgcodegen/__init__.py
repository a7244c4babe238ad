"""
pgcodegen: PostgreSQL column-type resolution for Go code generation.

Architecture:
    catalog.yml → Ingestion (CatalogLoader) → Domain (Catalog) → Adapter → Go type

Layers:
    - domain/: Catalog primitives (schemas, tables, enums, composite types,
      columns) and qualified identifiers
    - ingestion/: YAML loading and catalog construction
    - adapters/golang/: Go type resolution, driver profiles, struct naming
    - adapters/kotlin/: Kotlin AST node boxing
    - core/: Batch resolution over a whole catalog

Key Concepts:
    - Resolution is a pure function of (catalog, column, driver profile)
    - Unknown types degrade to ``interface{}`` rather than failing generation
"""

__version__ = "0.1.0"
