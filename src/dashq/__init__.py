# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog search, grouping and check-filter editing toolkit."""

from __future__ import annotations

from typing import Final

from .catalog import (
    CatalogBrowser,
    CatalogIndex,
    CatalogItem,
    CatalogMetadata,
    CatalogSection,
    CatalogView,
    GroupBy,
    OwningGroup,
    build_catalog_index,
    build_catalog_view,
)
from .errors import CatalogDocumentError, DashqError, FilterParseError
from .filters import (
    FieldCatalog,
    FilterEditor,
    FilterGroup,
    FilterLeaf,
    FilterValidity,
    check_filter,
    validate_filter,
)

__version__: Final[str] = "0.1.0"

__all__: Final[tuple[str, ...]] = (
    "CatalogBrowser",
    "CatalogDocumentError",
    "CatalogIndex",
    "CatalogItem",
    "CatalogMetadata",
    "CatalogSection",
    "CatalogView",
    "DashqError",
    "FieldCatalog",
    "FilterEditor",
    "FilterGroup",
    "FilterLeaf",
    "FilterParseError",
    "FilterValidity",
    "GroupBy",
    "OwningGroup",
    "build_catalog_index",
    "build_catalog_view",
    "check_filter",
    "validate_filter",
    "__version__",
)
