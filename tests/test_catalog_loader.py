"""Tests for catalog YAML ingestion."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from pgcodegen.domain import Catalog
from pgcodegen.ingestion import CatalogLoader, load_catalog

CATALOG_YAML = """\
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
          - name: tags
            type: text
            is_array: true
"""


class TestCatalogLoaderFile:
    """Loading a single catalog file."""

    def test_load_file(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.yml"
        path.write_text(CATALOG_YAML, encoding="utf-8")

        catalog = CatalogLoader(path).load()

        assert isinstance(catalog, Catalog)
        assert catalog.default_schema == "public"
        public = catalog.get_schema("public")
        assert public is not None
        assert [e.name for e in public.enums] == ["status"]
        assert public.enums[0].vals == ["open", "closed"]
        assert [c.name for c in public.composite_types] == ["address"]

        columns = public.tables[0].columns
        assert columns[0].declared_type == "bigserial"
        assert columns[0].not_null is True
        assert columns[1].is_array is True
        assert columns[1].not_null is False

    def test_default_schema_defaults_to_public(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.yml"
        path.write_text("schemas:\n  - name: app\n", encoding="utf-8")

        catalog = load_catalog(path)

        assert catalog.default_schema == "public"
        assert [s.name for s in catalog.schemas] == ["app"]

    def test_empty_file_is_empty_catalog(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.yml"
        path.write_text("", encoding="utf-8")

        assert load_catalog(path) == Catalog()


class TestCatalogLoaderDirectory:
    """Loading a directory of catalog files."""

    def test_schemas_concatenate_in_sorted_file_order(self, tmp_path: Path) -> None:
        (tmp_path / "b.yml").write_text(
            "schemas:\n  - name: billing\n", encoding="utf-8"
        )
        (tmp_path / "a.yaml").write_text(
            "default_schema: app\nschemas:\n  - name: app\n", encoding="utf-8"
        )
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "c.yml").write_text("schemas:\n  - name: zeta\n", encoding="utf-8")

        catalog = load_catalog(tmp_path)

        assert catalog.default_schema == "app"
        assert [s.name for s in catalog.schemas] == ["app", "billing", "zeta"]

    def test_first_default_schema_wins(self, tmp_path: Path) -> None:
        (tmp_path / "a.yml").write_text("default_schema: one\n", encoding="utf-8")
        (tmp_path / "b.yml").write_text("default_schema: two\n", encoding="utf-8")

        assert load_catalog(tmp_path).default_schema == "one"


class TestCatalogLoaderErrors:
    """Errors surface from the loader."""

    def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "missing.yml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.yml"
        path.write_text("schemas: [unclosed\n", encoding="utf-8")

        with pytest.raises(yaml.YAMLError):
            load_catalog(path)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.yml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Expected a mapping"):
            load_catalog(path)

    def test_empty_column_type_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.yml"
        path.write_text(
            "schemas:\n  - name: public\n    tables:\n      - name: t\n"
            "        columns:\n          - name: c\n            type: ''\n",
            encoding="utf-8",
        )

        with pytest.raises(ValidationError):
            load_catalog(path)

    def test_unknown_keys_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.yml"
        path.write_text("schemas:\n  - name: public\n    views: []\n", encoding="utf-8")

        with pytest.raises(ValidationError):
            load_catalog(path)
