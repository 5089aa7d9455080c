# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Layered configuration sources (defaults, pyproject, project TOML)."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .models import ConfigError, DashqConfig

LOGGER = logging.getLogger(__name__)

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PROJECT_CONFIG_FILENAME: Final[str] = ".dashq.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "dashq"


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated with ``override``, merging nested tables."""

    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        existing = merged.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(existing, value)
        else:
            merged[key] = value
    return merged


def _read_toml(path: Path) -> dict[str, Any]:
    """Parse the TOML document at ``path``.

    Raises:
        ConfigError: If the document cannot be parsed.
    """

    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML ({exc})") from exc


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return DashqConfig().to_dict()

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self.path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, Any]:
        if not self.path.exists():
            return {}
        return _read_toml(self.path)

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.dashq]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return dict(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


ConfigSource = DefaultConfigSource | TomlConfigSource


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence."""

    def __init__(self, sources: Sequence[ConfigSource]) -> None:
        self._sources = tuple(sources)

    @classmethod
    def for_root(cls, root: Path, *, config_path: Path | None = None) -> ConfigLoader:
        """Return a loader for the project rooted at ``root``.

        Precedence, lowest first: built-in defaults, ``[tool.dashq]`` in
        ``pyproject.toml``, ``.dashq.toml``, then ``config_path``.

        Args:
            root: Project root directory.
            config_path: Optional explicit configuration file.

        Returns:
            ConfigLoader: Loader wired with the project sources.
        """

        sources: list[ConfigSource] = [
            DefaultConfigSource(),
            PyProjectConfigSource(root / PYPROJECT_FILENAME),
            TomlConfigSource(root / PROJECT_CONFIG_FILENAME),
        ]
        if config_path is not None:
            if not config_path.exists():
                raise ConfigError(f"{config_path}: configuration file does not exist")
            sources.append(TomlConfigSource(config_path))
        return cls(sources)

    def load(self) -> DashqConfig:
        """Merge every source and validate the result.

        Returns:
            DashqConfig: Validated configuration.

        Raises:
            ConfigError: If a source is unreadable or the merged data is invalid.
        """

        merged: dict[str, Any] = {}
        for source in self._sources:
            fragment = source.load()
            if fragment:
                LOGGER.debug("applying configuration from %s", source.describe())
            merged = _deep_merge(merged, fragment)
        try:
            return DashqConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"invalid configuration: {exc}") from exc


def load_config(root: Path, *, config_path: Path | None = None) -> DashqConfig:
    """Load the configuration for the project rooted at ``root``."""

    return ConfigLoader.for_root(root, config_path=config_path).load()


__all__ = [
    "PROJECT_CONFIG_FILENAME",
    "ConfigLoader",
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_config",
]
