# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Build the searchable catalog index from raw items and mod metadata."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .models import CatalogItem, CatalogMetadata

LOGGER = logging.getLogger(__name__)

TagKeysListener = Callable[[tuple[str, ...]], None]


@dataclass(frozen=True, slots=True)
class CatalogIndex:
    """Read-only snapshot of the catalog annotated with owning-group metadata.

    Attributes:
        items: Every catalog item, each annotated with its resolved mod.
        top_level: Subset of ``items`` flagged as top level, in catalog order.
        tag_keys: Tag keys observed across ``items`` in first-seen order.
    """

    items: tuple[CatalogItem, ...] = ()
    top_level: tuple[CatalogItem, ...] = ()
    tag_keys: tuple[str, ...] = ()
    _by_id: Mapping[str, CatalogItem] = field(default_factory=dict, repr=False)

    @property
    def by_id(self) -> Mapping[str, CatalogItem]:
        """Return a read-only mapping of item full names to indexed items."""

        return self._by_id

    def get(self, item_id: str) -> CatalogItem | None:
        """Return the indexed item registered under ``item_id`` if any."""

        return self._by_id.get(item_id)

    def __len__(self) -> int:
        return len(self.items)


EMPTY_INDEX = CatalogIndex()


def build_catalog_index(
    items: Iterable[CatalogItem] | None,
    metadata: CatalogMetadata | None,
    *,
    on_tag_keys: TagKeysListener | None = None,
) -> CatalogIndex:
    """Normalise ``items`` into a :class:`CatalogIndex`.

    Each item is annotated with its owning mod: the current mod when the
    identifiers match, otherwise the installed mod of the same name, otherwise
    an empty record. Items repeating an already indexed full name are skipped.

    Args:
        items: Raw catalog items, or ``None`` when the catalog has not loaded.
        metadata: Mod metadata, or ``None`` when it has not loaded.
        on_tag_keys: Optional listener receiving the discovered tag keys once
            the index has been built.

    Returns:
        CatalogIndex: Fresh index; empty when either input is missing.
    """

    if items is None or metadata is None:
        LOGGER.debug("catalog inputs not loaded; returning empty index")
        return EMPTY_INDEX

    indexed: list[CatalogItem] = []
    top_level: list[CatalogItem] = []
    by_id: dict[str, CatalogItem] = {}
    tag_keys: dict[str, None] = {}
    for item in items:
        if item.full_name in by_id:
            LOGGER.debug("skipping duplicate catalog item %s", item.full_name)
            continue
        group = metadata.resolve_group(item.mod_full_name)
        if not group.display_name and item.mod_full_name:
            LOGGER.debug("unresolved mod %s for %s", item.mod_full_name, item.full_name)
        annotated = item.model_copy(update={"mod": group})
        indexed.append(annotated)
        by_id[annotated.full_name] = annotated
        if annotated.is_top_level:
            top_level.append(annotated)
        for tag_key in annotated.tags:
            tag_keys.setdefault(tag_key, None)

    index = CatalogIndex(
        items=tuple(indexed),
        top_level=tuple(top_level),
        tag_keys=tuple(tag_keys),
        _by_id=MappingProxyType(by_id),
    )
    LOGGER.debug(
        "indexed %d catalog items (%d top level, %d tag keys)",
        len(index.items),
        len(index.top_level),
        len(index.tag_keys),
    )
    if on_tag_keys is not None:
        on_tag_keys(index.tag_keys)
    return index


__all__ = ["EMPTY_INDEX", "CatalogIndex", "TagKeysListener", "build_catalog_index"]
