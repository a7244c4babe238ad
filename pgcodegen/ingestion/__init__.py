"""Ingestion layer - catalog YAML loading."""

from pgcodegen.ingestion.loader import CatalogLoader, load_catalog

__all__ = ["CatalogLoader", "load_catalog"]
