# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from dashq.catalog import GroupBy
from dashq.config import ConfigError, DashqConfig, load_config
from dashq.filters import ValueResolution
from dashq.filters.fields import FieldCatalog


def test_defaults_without_sources(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == DashqConfig()
    assert config.search.quick_filter_tags == ["category", "service", "type"]
    assert config.search.grouping() == GroupBy.by_tag("service")
    assert config.output.emoji


def test_pyproject_section_is_applied(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.dashq.search]\ngroup_by = "mod"\n',
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.search.grouping() == GroupBy.by_mod()
    assert config.search.quick_filter_tags == ["category", "service", "type"]


def test_project_file_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.dashq.search]\ngroup_by = "mod"\nquick_filter_tags = ["service"]\n',
        encoding="utf-8",
    )
    (tmp_path / ".dashq.toml").write_text('[search]\ngroup_by = "tag:category"\n', encoding="utf-8")

    config = load_config(tmp_path)

    assert config.search.group_by == "tag:category"
    assert config.search.quick_filter_tags == ["service"]


def test_explicit_file_has_highest_precedence(tmp_path: Path) -> None:
    (tmp_path / ".dashq.toml").write_text("[output]\nemoji = false\ncolor = false\n", encoding="utf-8")
    explicit = tmp_path / "custom.toml"
    explicit.write_text("[output]\nemoji = true\n", encoding="utf-8")

    config = load_config(tmp_path, config_path=explicit)

    assert config.output.emoji
    assert not config.output.color


def test_filter_settings_flow_into_field_catalog(tmp_path: Path) -> None:
    (tmp_path / ".dashq.toml").write_text(
        '[filters]\nreference_types = ["benchmark"]\n\n[filters.labels]\nseverity = "Impact"\n',
        encoding="utf-8",
    )

    settings = load_config(tmp_path).filters.field_settings()
    catalog = FieldCatalog.from_context({"control": {"value": {"c": 1}}, "severity": {"value": {"high": 1}}}, settings)

    assert catalog.resolution("control") is ValueResolution.PLAIN
    assert catalog.field_type("severity").label == "Impact"


@pytest.mark.parametrize(
    "content",
    [
        '[search]\ngroup_by = "bogus"\n',
        "[search]\nunknown = 1\n",
        "[search\n",
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, content: str) -> None:
    (tmp_path / ".dashq.toml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_missing_explicit_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_config(tmp_path, config_path=tmp_path / "absent.toml")
