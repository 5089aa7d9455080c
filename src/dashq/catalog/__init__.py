# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog indexing, search, ordering and grouping."""

from __future__ import annotations

from typing import Final

from .grouping import CatalogSection, GroupBy, GroupByKind, group_items, section_title
from .indexer import EMPTY_INDEX, CatalogIndex, build_catalog_index
from .io import CatalogDocument, load_catalog_document, load_metadata
from .models import CatalogItem, CatalogMetadata, OwningGroup
from .pipeline import CatalogBrowser, CatalogView, build_catalog_view, view_from_index
from .search import (
    filter_items,
    is_query_active,
    merge_tag_into_search,
    quick_filter_tags,
    search_catalog,
    searchable_text,
    select_search_base,
    tokenize_query,
)
from .sorting import breadcrumb_parts, breadcrumb_sort_key, sort_search_results
from .types import OTHER_SECTION_TITLE

__all__: Final[tuple[str, ...]] = (
    "EMPTY_INDEX",
    "OTHER_SECTION_TITLE",
    "CatalogBrowser",
    "CatalogDocument",
    "CatalogIndex",
    "CatalogItem",
    "CatalogMetadata",
    "CatalogSection",
    "CatalogView",
    "GroupBy",
    "GroupByKind",
    "OwningGroup",
    "breadcrumb_parts",
    "breadcrumb_sort_key",
    "build_catalog_index",
    "build_catalog_view",
    "filter_items",
    "group_items",
    "is_query_active",
    "load_catalog_document",
    "load_metadata",
    "merge_tag_into_search",
    "quick_filter_tags",
    "search_catalog",
    "searchable_text",
    "section_title",
    "select_search_base",
    "sort_search_results",
    "tokenize_query",
    "view_from_index",
)
