# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Index, search, sort and group the catalog as one explicit pipeline."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .grouping import CatalogSection, GroupBy, group_items
from .indexer import EMPTY_INDEX, CatalogIndex, TagKeysListener, build_catalog_index
from .models import CatalogItem, CatalogMetadata
from .search import is_query_active, merge_tag_into_search, search_catalog
from .sorting import sort_search_results

LOGGER = logging.getLogger(__name__)

SearchValueListener = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class CatalogView:
    """Result of one pipeline run, ready for rendering.

    Attributes:
        index: Catalog index the view was computed from.
        query: Search value the view was computed for.
        results: Items listed by the view: sorted matches while a query is
            active, otherwise the top-level items in catalog order.
        sections: ``results`` partitioned by the grouping mode.
        loaded: ``False`` while the catalog or its metadata is missing.
    """

    index: CatalogIndex
    query: str
    group_by: GroupBy
    results: tuple[CatalogItem, ...]
    sections: tuple[CatalogSection, ...]
    loaded: bool

    @property
    def search_active(self) -> bool:
        """Return ``True`` when the view lists search matches."""

        return is_query_active(self.query)

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when a loaded view lists nothing."""

        return self.loaded and not self.results


def build_catalog_view(
    items: Sequence[CatalogItem] | None,
    metadata: CatalogMetadata | None,
    query: str | None,
    group_by: GroupBy,
    *,
    on_tag_keys: TagKeysListener | None = None,
) -> CatalogView:
    """Run ``index -> search -> sort -> group`` over the supplied inputs.

    Args:
        items: Raw catalog items, or ``None`` while not loaded.
        metadata: Mod metadata, or ``None`` while not loaded.
        query: Free-text search value.
        group_by: Grouping mode for the resulting sections.
        on_tag_keys: Optional listener receiving the discovered tag keys.

    Returns:
        CatalogView: Fully computed view; empty when inputs are missing.
    """

    search_value = query or ""
    if items is None or metadata is None:
        return CatalogView(
            index=EMPTY_INDEX,
            query=search_value,
            group_by=group_by,
            results=(),
            sections=(),
            loaded=False,
        )
    index = build_catalog_index(items, metadata, on_tag_keys=on_tag_keys)
    return view_from_index(index, search_value, group_by)


def view_from_index(index: CatalogIndex, query: str, group_by: GroupBy) -> CatalogView:
    """Run the search, sort and group stages against an existing index."""

    matches = search_catalog(index, query)
    if is_query_active(query):
        matches = sort_search_results(matches, index.by_id)
    sections = group_items(matches, group_by)
    return CatalogView(
        index=index,
        query=query,
        group_by=group_by,
        results=tuple(matches),
        sections=tuple(sections),
        loaded=True,
    )


@dataclass(slots=True)
class CatalogBrowser:
    """Stateful catalog session recomputing its view whenever an input changes.

    Re-indexing only happens when the catalog or metadata changes; query and
    grouping changes rerun the downstream stages against the current index.
    """

    group_by: GroupBy
    on_tag_keys: TagKeysListener | None = None
    on_search_value: SearchValueListener | None = None
    _items: tuple[CatalogItem, ...] | None = field(default=None, init=False, repr=False)
    _metadata: CatalogMetadata | None = field(default=None, init=False, repr=False)
    _query: str = field(default="", init=False, repr=False)
    _index: CatalogIndex | None = field(default=None, init=False, repr=False)
    _view: CatalogView | None = field(default=None, init=False, repr=False)

    @property
    def view(self) -> CatalogView:
        """Return the view matching the current inputs."""

        if self._view is None:
            return self._recompute()
        return self._view

    @property
    def search_value(self) -> str:
        """Return the current free-text search value."""

        return self._query

    def load(self, items: Sequence[CatalogItem] | None, metadata: CatalogMetadata | None) -> CatalogView:
        """Replace the catalog and metadata, rebuilding the index.

        Args:
            items: Raw catalog items, or ``None`` to mark the catalog unloaded.
            metadata: Mod metadata, or ``None`` to mark it unloaded.

        Returns:
            CatalogView: Recomputed view.
        """

        self._items = tuple(items) if items is not None else None
        self._metadata = metadata
        self._index = None
        return self._recompute()

    def set_search(self, value: str) -> CatalogView:
        """Replace the search value and recompute the view."""

        self._query = value
        return self._recompute()

    def set_group_by(self, group_by: GroupBy) -> CatalogView:
        """Replace the grouping mode and recompute the view."""

        self.group_by = group_by
        return self._recompute()

    def activate_tag(self, tag_value: str) -> CatalogView:
        """Merge a quick-filter tag into the search value.

        The search-value listener receives the merged value, which may equal
        the current value when the tag is already part of the query.
        """

        merged = merge_tag_into_search(self._query, tag_value)
        if self.on_search_value is not None:
            self.on_search_value(merged)
        return self.set_search(merged)

    def clear_search(self) -> CatalogView:
        """Reset the search value to empty."""

        if self.on_search_value is not None:
            self.on_search_value("")
        return self.set_search("")

    def _recompute(self) -> CatalogView:
        """Rerun every stage downstream of the current inputs."""

        if self._items is None or self._metadata is None:
            self._view = build_catalog_view(None, None, self._query, self.group_by)
            return self._view
        if self._index is None:
            self._index = build_catalog_index(self._items, self._metadata, on_tag_keys=self.on_tag_keys)
        self._view = view_from_index(self._index, self._query, self.group_by)
        LOGGER.debug(
            "catalog view recomputed: query=%r group_by=%s results=%d",
            self._query,
            self.group_by,
            len(self._view.results),
        )
        return self._view


__all__ = ["CatalogBrowser", "CatalogView", "SearchValueListener", "build_catalog_view", "view_from_index"]
