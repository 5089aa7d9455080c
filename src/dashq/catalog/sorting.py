# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Breadcrumb-aware ordering of search results."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .models import CatalogItem
from .types import BREADCRUMB_SEPARATOR, DASHBOARD_KIND


def breadcrumb_parts(item: CatalogItem, index_by_id: Mapping[str, CatalogItem]) -> tuple[CatalogItem, ...]:
    """Return the resolved ancestors along the first trunk path of ``item``.

    Unknown ancestor identifiers are dropped. The path runs from the root
    towards ``item`` and, when the catalog includes ``item`` itself in its
    trunk, ends with it.

    Args:
        item: Catalog item whose breadcrumb is requested.
        index_by_id: Lookup of catalog items keyed by full name.

    Returns:
        tuple[CatalogItem, ...]: Resolved ancestors; empty when the item has
        no trunk path.
    """

    if not item.trunks or not item.trunks[0]:
        return ()
    parts: list[CatalogItem] = []
    for ancestor_id in item.trunks[0]:
        ancestor = index_by_id.get(ancestor_id)
        if ancestor is not None:
            parts.append(ancestor)
    return tuple(parts)


def breadcrumb_sort_key(item: CatalogItem, index_by_id: Mapping[str, CatalogItem]) -> str:
    """Return the lowercase key used to order ``item`` among search results.

    Dashboards and items without a trunk path sort by their own name; nested
    items sort by their ancestor chain joined with ``" > "``.
    """

    if item.kind == DASHBOARD_KIND or not item.trunks or not item.trunks[0]:
        return item.display_name.lower()
    names = (part.display_name for part in breadcrumb_parts(item, index_by_id))
    return BREADCRUMB_SEPARATOR.join(name for name in names if name).lower()


def sort_search_results(
    items: Iterable[CatalogItem],
    index_by_id: Mapping[str, CatalogItem],
) -> list[CatalogItem]:
    """Return ``items`` ordered by breadcrumb key; ties keep their input order."""

    return sorted(items, key=lambda item: breadcrumb_sort_key(item, index_by_id))


__all__ = ["breadcrumb_parts", "breadcrumb_sort_key", "sort_search_results"]
