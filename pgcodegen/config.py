"""Configuration schema for pgcodegen.

Defines the pgcodegen.yml configuration file format using Pydantic models.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from pgcodegen.adapters.golang.driver import DriverProfile, parse_driver

# Environment variable enabling diagnostics for unresolved types
DEBUG_ENV = "PGCODEGEN_DEBUG"


def get_default_debug() -> bool:
    """Get default diagnostics flag from environment."""
    return os.environ.get(DEBUG_ENV, "").lower() in ("1", "true", "yes", "on")


class GoConfig(BaseModel):
    """Go generation settings."""

    sql_package: str = ""  # "pgx/v4", or empty for database/sql
    rename: dict[str, str] = Field(default_factory=dict)  # SQL name -> struct name

    model_config = {"frozen": True}

    @field_validator("sql_package", mode="before")
    @classmethod
    def parse_sql_package(cls, v: Any) -> str:
        """Accept a missing value as the standard profile."""
        if v is None:
            return ""
        return str(v)

    @property
    def driver(self) -> DriverProfile:
        """Driver profile selected by sql_package."""
        return parse_driver(self.sql_package)


class OptionsConfig(BaseModel):
    """Resolver options."""

    debug: bool = Field(default_factory=get_default_debug)  # Log unresolved types

    model_config = {"frozen": True}


class CodegenConfig(BaseModel):
    """
    Root configuration for pgcodegen.

    This is the schema for pgcodegen.yml files.

    Example:
        catalog: ./catalog.yml  # File or directory of catalog YAML

        go:
          sql_package: pgx/v4
          rename:
            status: State

        options:
          debug: true
    """

    catalog: str
    go: GoConfig = Field(default_factory=GoConfig)
    options: OptionsConfig = Field(default_factory=OptionsConfig)

    model_config = {"frozen": True}

    @property
    def catalog_path(self) -> Path:
        """Get catalog as Path."""
        return Path(self.catalog)

    def resolve_relative_to(self, config_path: Path) -> CodegenConfig:
        """Return a copy whose relative catalog path is anchored at the config file."""
        if self.catalog_path.is_absolute():
            return self
        anchored = config_path.resolve().parent / self.catalog_path
        return self.model_copy(update={"catalog": str(anchored)})

    @classmethod
    def from_yaml(cls, content: str) -> CodegenConfig:
        """Parse config from YAML string."""
        data = yaml.safe_load(content)
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: Path | str) -> CodegenConfig:
        """Load config from a YAML file."""
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        return cls.from_yaml(content).resolve_relative_to(path)


# Config file discovery
CONFIG_FILENAMES = ["pgcodegen.yml", "pgcodegen.yaml", ".pgcodegen.yml", ".pgcodegen.yaml"]


def find_config(start_dir: Path | str | None = None) -> Path | None:
    """
    Find pgcodegen.yml config file.

    Searches in:
    1. start_dir (if provided)
    2. Current working directory
    3. Parent directories up to root

    Args:
        start_dir: Directory to start search from

    Returns:
        Path to config file, or None if not found
    """
    if start_dir is None:
        start_dir = Path.cwd()
    else:
        start_dir = Path(start_dir)

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        parent = current.parent
        if parent == current:
            # Reached root
            break
        current = parent

    return None


def load_config(path: Path | str | None = None) -> CodegenConfig:
    """
    Load configuration from file.

    If path is not provided, searches for pgcodegen.yml in current
    and parent directories.

    Args:
        path: Explicit path to config file

    Returns:
        Parsed CodegenConfig

    Raises:
        FileNotFoundError: If no config file found
        ValueError: If config is invalid
    """
    if path is None:
        path = find_config()
        if path is None:
            raise FileNotFoundError(
                "No pgcodegen.yml found. Create one or specify path with --config"
            )
    else:
        path = Path(path)

    return CodegenConfig.from_file(path)
