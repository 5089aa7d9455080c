# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the catalog engine."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

OTHER_SECTION_TITLE: Final[str] = "Other"
DASHBOARD_KIND: Final[str] = "dashboard"
BREADCRUMB_SEPARATOR: Final[str] = " > "
DEFAULT_QUICK_FILTER_TAGS: Final[tuple[str, ...]] = ("category", "service", "type")

__all__ = [
    "BREADCRUMB_SEPARATOR",
    "DASHBOARD_KIND",
    "DEFAULT_QUICK_FILTER_TAGS",
    "JSONPrimitive",
    "JSONValue",
    "OTHER_SECTION_TITLE",
]
