# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loading for the command palette loader."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from contrib_spec.commands import CONTRIBUTION_POINT

from .manifests import DEFAULT_MANIFEST_NAME

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "cmdpalette"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class DiscoveryConfig(BaseModel):
    """Configuration for locating contributing packages."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    extensions_dir: Path = Field(default_factory=lambda: Path("extensions"))
    manifest_name: str = DEFAULT_MANIFEST_NAME
    contribution_key: str = CONTRIBUTION_POINT
    include_entry_points: bool = True


class OutputConfig(BaseModel):
    """Configuration for console rendering."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    color: bool = True
    emoji: bool = True
    verbose: bool = False
    show_rejected: bool = True


class PaletteConfig(BaseModel):
    """Top-level configuration grouping every section."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, source: str) -> PaletteConfig:
        """Build a configuration from a raw mapping.

        Args:
            data: Mapping holding ``discovery``/``output`` tables.
            source: Human-readable origin used in error messages.

        Returns:
            PaletteConfig: Validated configuration.

        Raises:
            ConfigError: If the mapping contains unknown keys or invalid values.
        """

        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigError(f"{source}: {exc}") from exc


def _read_toml(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML ({exc})") from exc


def load_config(path: Path | None = None) -> PaletteConfig:
    """Load configuration from ``path``.

    ``pyproject.toml`` files contribute their ``[tool.cmdpalette]`` table;
    any other TOML document is read as a whole. A missing file yields the
    defaults.

    Args:
        path: Optional configuration file.

    Returns:
        PaletteConfig: Loaded configuration.

    Raises:
        ConfigError: If the document is not valid TOML or holds invalid settings.
    """

    if path is None or not path.exists():
        return PaletteConfig()
    data = _read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        tool_section = data.get(PYPROJECT_TOOL_KEY, {})
        data = tool_section.get(PYPROJECT_SECTION_KEY, {}) if isinstance(tool_section, Mapping) else {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"{path}: configuration must be a table")
    config = PaletteConfig.from_mapping(data, source=str(path))
    extensions_dir = config.discovery.extensions_dir
    if not extensions_dir.is_absolute():
        config.discovery.extensions_dir = path.parent / extensions_dir
    return config


__all__ = [
    "ConfigError",
    "DiscoveryConfig",
    "OutputConfig",
    "PaletteConfig",
    "load_config",
]
