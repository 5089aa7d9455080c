# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for dashq."""

from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..catalog.grouping import GroupBy
from ..catalog.types import DEFAULT_QUICK_FILTER_TAGS
from ..errors import DashqError
from ..filters.fields import (
    DEFAULT_REPEATABLE_TYPES,
    FieldCatalogSettings,
    settings_from_names,
)

DEFAULT_GROUP_BY: Final[str] = "tag:service"


class ConfigError(DashqError):
    """Raised when configuration input is invalid."""


class SearchConfig(BaseModel):
    """Configuration for catalog search and grouping."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    quick_filter_tags: list[str] = Field(default_factory=lambda: list(DEFAULT_QUICK_FILTER_TAGS))
    group_by: str = DEFAULT_GROUP_BY

    @field_validator("group_by")
    @classmethod
    def _validate_group_by(cls, value: str) -> str:
        """Ensure ``group_by`` names a supported grouping mode."""

        return str(GroupBy.parse(value))

    def grouping(self) -> GroupBy:
        """Return the configured grouping mode."""

        return GroupBy.parse(self.group_by)


class FilterConfig(BaseModel):
    """Classification of filter field types."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    status_types: list[str] = Field(default_factory=lambda: ["status"])
    reference_types: list[str] = Field(default_factory=lambda: ["benchmark", "control"])
    repeatable_types: list[str] = Field(default_factory=lambda: sorted(DEFAULT_REPEATABLE_TYPES))
    labels: dict[str, str] = Field(default_factory=dict)

    def field_settings(self) -> FieldCatalogSettings:
        """Return the field catalog settings described by this section."""

        return settings_from_names(
            status_types=self.status_types,
            reference_types=self.reference_types,
            repeatable_types=self.repeatable_types,
            labels=self.labels,
        )


class OutputConfig(BaseModel):
    """Configuration for console output."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    color: bool = True
    emoji: bool = True


class DashqConfig(BaseModel):
    """Top-level configuration aggregating every section."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    search: SearchConfig = Field(default_factory=SearchConfig)
    filters: FilterConfig = Field(default_factory=FilterConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping of the configuration."""

        return self.model_dump(mode="json")


__all__ = [
    "DEFAULT_GROUP_BY",
    "ConfigError",
    "DashqConfig",
    "FilterConfig",
    "OutputConfig",
    "SearchConfig",
]
