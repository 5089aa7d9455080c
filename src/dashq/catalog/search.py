# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Free-text search over the catalog index."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence

from .indexer import CatalogIndex
from .models import CatalogItem


def tokenize_query(raw_query: str | None) -> tuple[str, ...]:
    """Split ``raw_query`` into lowercase search parts.

    Runs of whitespace collapse, so ``"a   b"`` and ``"a b"`` yield the same
    parts and no empty part can match every item.

    Args:
        raw_query: Query text as typed by the user.

    Returns:
        tuple[str, ...]: Lowercase search parts; empty for a blank query.
    """

    if not raw_query:
        return ()
    return tuple(raw_query.strip().lower().split())


def is_query_active(raw_query: str | None) -> bool:
    """Return ``True`` when ``raw_query`` contains at least one search part."""

    return bool(tokenize_query(raw_query))


def searchable_text(item: CatalogItem) -> str:
    """Return the lowercase text that search parts are matched against.

    The text joins the owning mod name, the item name and one ``key=value``
    entry per tag.
    """

    mod_name = item.mod.display_name if item.mod is not None else ""
    tag_text = " ".join(f"{key}={value}" for key, value in item.tags.items())
    return f"{mod_name} {item.display_name} {tag_text}".lower()


def matches(item: CatalogItem, search_parts: Sequence[str]) -> bool:
    """Return ``True`` when every search part is a substring of the item text."""

    text = searchable_text(item)
    return all(part in text for part in search_parts)


def filter_items(items: Iterable[CatalogItem], raw_query: str | None) -> list[CatalogItem]:
    """Return the items of ``items`` matching every part of ``raw_query``.

    Args:
        items: Candidate catalog items.
        raw_query: Query text; a blank query keeps every item.

    Returns:
        list[CatalogItem]: Matching items in their input order.
    """

    search_parts = tokenize_query(raw_query)
    return [item for item in items if matches(item, search_parts)]


def select_search_base(index: CatalogIndex, raw_query: str | None) -> tuple[CatalogItem, ...]:
    """Return the item set a query runs against.

    Only top-level items are listed while no query is active; an active query
    searches the full index so nested benchmarks can be found.
    """

    return index.items if is_query_active(raw_query) else index.top_level


def search_catalog(index: CatalogIndex, raw_query: str | None) -> list[CatalogItem]:
    """Search ``index`` for ``raw_query``.

    Args:
        index: Catalog index to search.
        raw_query: Query text entered by the user.

    Returns:
        list[CatalogItem]: The top-level items when the query is blank,
        otherwise the matching items of the full index. Ordering of matches is
        left to :func:`dashq.catalog.sorting.sort_search_results`.
    """

    base = select_search_base(index, raw_query)
    if not is_query_active(raw_query):
        return list(base)
    return filter_items(base, raw_query)


def quick_filter_tags(item: CatalogItem, keys: Collection[str]) -> list[tuple[str, str]]:
    """Return the ``(key, value)`` tag pairs of ``item`` offered as quick filters."""

    return [(key, value) for key, value in item.tags.items() if key in keys]


def merge_tag_into_search(current: str | None, tag_value: str) -> str:
    """Return the search value produced by activating a quick-filter tag.

    The tag value is appended to the trimmed query unless the query already
    contains it as a substring.

    Args:
        current: Current free-text search value.
        tag_value: Value of the activated tag.

    Returns:
        str: Updated search value.
    """

    existing = current.strip() if current else ""
    if not existing:
        return tag_value
    if tag_value in existing:
        return existing
    return f"{existing} {tag_value}"


__all__ = [
    "filter_items",
    "is_query_active",
    "matches",
    "merge_tag_into_search",
    "quick_filter_tags",
    "search_catalog",
    "searchable_text",
    "select_search_base",
    "tokenize_query",
]
