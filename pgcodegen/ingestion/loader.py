"""CatalogLoader - loads catalog YAML files into a Catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from pgcodegen.domain.catalog import Catalog


class CatalogLoader:
    """
    Load a catalog from a YAML file or a directory of YAML files.

    Handles:
    - Finding all YAML files recursively (sorted for deterministic schema order)
    - Concatenating `schemas:` entries across files
    - Taking `default_schema:` from the first file that sets it

    Example file:
        default_schema: public
        schemas:
          - name: public
            enums:
              - name: status
                vals: [open, closed]
            composite_types:
              - name: address
            tables:
              - name: orders
                columns:
                  - name: id
                    type: bigserial
                    not_null: true
    """

    def __init__(self, base_path: str | Path) -> None:
        self.base_path = Path(base_path)

    def load(self) -> Catalog:
        """Load and validate the catalog.

        Raises:
            FileNotFoundError: If base_path does not exist
            yaml.YAMLError: If a file is not valid YAML
            pydantic.ValidationError: If the merged catalog is invalid
        """
        if not self.base_path.exists():
            raise FileNotFoundError(f"Catalog not found: {self.base_path}")

        default_schema: str | None = None
        schemas: list[dict[str, Any]] = []

        for file_path in self._find_yaml_files():
            doc = self._load_file(file_path)
            if not doc:
                continue
            if default_schema is None and doc.get("default_schema"):
                default_schema = doc["default_schema"]
            schemas.extend(doc.get("schemas") or [])

        data: dict[str, Any] = {"schemas": schemas}
        if default_schema is not None:
            data["default_schema"] = default_schema
        return Catalog.model_validate(data)

    def _find_yaml_files(self) -> list[Path]:
        """Find all .yml and .yaml files (or the single configured file)."""
        if self.base_path.is_file():
            return [self.base_path]
        files: list[Path] = []
        for pattern in ["**/*.yml", "**/*.yaml"]:
            files.extend(self.base_path.glob(pattern))
        return sorted(set(files))

    def _load_file(self, file_path: Path) -> dict[str, Any]:
        """Load and parse a single YAML file."""
        content = file_path.read_text(encoding="utf-8")
        doc = yaml.safe_load(content)
        if doc is None:
            return {}
        if not isinstance(doc, dict):
            raise ValueError(f"Expected a mapping in {file_path}, got {type(doc).__name__}")
        return doc


def load_catalog(path: str | Path) -> Catalog:
    """Load a catalog from a YAML file or directory."""
    return CatalogLoader(path).load()
