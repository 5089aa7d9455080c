# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Catalog data models shared across indexing, search and grouping."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import JSONValue


class OwningGroup(BaseModel):
    """Describe the mod that defines one or more catalog items.

    An empty record (no title, no short name) stands in for groups that the
    metadata does not know about.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    full_name: str = ""
    title: str | None = None
    short_name: str | None = None

    @property
    def display_name(self) -> str:
        """Return the title, falling back to the short name, else an empty string."""

        return self.title or self.short_name or ""


class CatalogItem(BaseModel):
    """Capture one dashboard, benchmark, snapshot or control in the catalog."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    full_name: str
    kind: str = Field(default="dashboard", alias="type")
    title: str | None = None
    short_name: str | None = None
    tags: dict[str, str] = Field(default_factory=dict)
    trunks: tuple[tuple[str, ...], ...] = Field(default_factory=tuple)
    is_top_level: bool = False
    mod_full_name: str | None = None
    mod: OwningGroup | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Mapping[str, JSONValue] | None) -> dict[str, str]:
        """Coerce tag values to strings, dropping tags without a value.

        Args:
            value: Raw tag mapping supplied by the catalog payload.

        Returns:
            dict[str, str]: Tag mapping with string keys and values.
        """

        if value is None:
            return {}
        if not isinstance(value, Mapping):
            return value
        return {str(key): str(item) for key, item in value.items() if item is not None}

    @field_validator("trunks", mode="before")
    @classmethod
    def _coerce_trunks(cls, value: JSONValue) -> JSONValue:
        """Treat a missing trunk list as empty."""

        return () if value is None else value

    @property
    def display_name(self) -> str:
        """Return the title, falling back to the short name, else an empty string."""

        return self.title or self.short_name or ""


class CatalogMetadata(BaseModel):
    """Metadata describing the current mod and the mods it has installed."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    mod: OwningGroup = Field(default_factory=OwningGroup)
    installed_mods: dict[str, OwningGroup] = Field(default_factory=dict)

    @field_validator("installed_mods", mode="before")
    @classmethod
    def _coerce_installed(cls, value: JSONValue) -> JSONValue:
        """Treat a missing installed-mods mapping as empty."""

        return {} if value is None else value

    def resolve_group(self, group_id: str | None) -> OwningGroup:
        """Return the owning group for ``group_id`` with an empty fallback.

        Args:
            group_id: Full name of the mod that owns a catalog item.

        Returns:
            OwningGroup: Current mod when the identifiers match, the installed
            mod registered under ``group_id``, or an empty record.
        """

        if group_id is not None and group_id == self.mod.full_name:
            return self.mod
        if group_id is None:
            return OwningGroup()
        return self.installed_mods.get(group_id, OwningGroup())


__all__ = ["CatalogItem", "CatalogMetadata", "OwningGroup"]
