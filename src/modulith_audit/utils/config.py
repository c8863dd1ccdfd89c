"""Configuration file support for modulith-audit."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from modulith_audit.models.catalog import CatalogConfig
from modulith_audit.models.gate import GateConfig, HygieneConfig


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: str = Field(default="terminal", description="Default output format")
    color: bool = Field(default=True, description="Enable color output")
    trace: bool = Field(default=True, description="Print the per-check trace")


class ModulithAuditConfig(BaseModel):
    """Main configuration for modulith-audit."""

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    hygiene: HygieneConfig = Field(default_factory=HygieneConfig)
    gate: GateConfig = Field(default_factory=GateConfig)


def get_config_paths() -> list[Path]:
    """Get possible configuration file paths.

    Returns:
        List of paths to check for configuration files, in priority order
    """
    paths = []

    # Current directory
    paths.append(Path.cwd() / ".modulith-audit.yaml")
    paths.append(Path.cwd() / ".modulith-audit.yml")
    paths.append(Path.cwd() / "modulith-audit.yaml")

    # Home directory
    home = Path.home()
    paths.append(home / ".modulith-audit.yaml")
    paths.append(home / ".config" / "modulith-audit" / "config.yaml")

    # XDG config directory
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        paths.append(Path(xdg_config) / "modulith-audit" / "config.yaml")

    return paths


def load_config(config_path: Path | str | None = None) -> ModulithAuditConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration

    Raises:
        FileNotFoundError: If an explicit config path does not exist
        ValueError: If the file is not valid YAML or does not match the schema
    """
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            return _load_config_file(path)
        raise FileNotFoundError(f"Config file not found: {config_path}")

    for path in get_config_paths():
        if path.exists():
            return _load_config_file(path)

    return ModulithAuditConfig()


def _load_config_file(path: Path) -> ModulithAuditConfig:
    """Load configuration from a specific file."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}") from e
    except OSError as e:
        raise ValueError(f"Failed to read config file: {e}") from e

    if data is None:
        return ModulithAuditConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    try:
        return ModulithAuditConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid config file {path}: {e}") from e
