# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Partition catalog items into titled sections."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .models import CatalogItem
from .types import OTHER_SECTION_TITLE

_TAG_PREFIX: Final[str] = "tag:"


class GroupByKind(str, Enum):
    """Enumerate the supported grouping modes."""

    TAG = "tag"
    MOD = "mod"


@dataclass(frozen=True, slots=True)
class GroupBy:
    """Grouping mode: by the value of one tag, or by owning mod."""

    kind: GroupByKind
    tag: str | None = None

    @classmethod
    def by_tag(cls, tag: str) -> GroupBy:
        """Return a mode grouping items by the value of ``tag``."""

        return cls(kind=GroupByKind.TAG, tag=tag)

    @classmethod
    def by_mod(cls) -> GroupBy:
        """Return a mode grouping items by owning mod."""

        return cls(kind=GroupByKind.MOD)

    @classmethod
    def parse(cls, raw: str) -> GroupBy:
        """Parse ``tag:<key>`` or ``mod`` into a grouping mode.

        Args:
            raw: Textual grouping mode, as used by configuration and the CLI.

        Returns:
            GroupBy: Parsed grouping mode.

        Raises:
            ValueError: If ``raw`` names no supported grouping mode.
        """

        token = raw.strip()
        if token == GroupByKind.MOD.value:
            return cls.by_mod()
        if token.startswith(_TAG_PREFIX) and token[len(_TAG_PREFIX) :].strip():
            return cls.by_tag(token[len(_TAG_PREFIX) :].strip())
        raise ValueError(f"unsupported group-by '{raw}': expected 'tag:<key>' or 'mod'")

    def __str__(self) -> str:
        if self.kind is GroupByKind.TAG:
            return f"{_TAG_PREFIX}{self.tag}"
        return self.kind.value


@dataclass(frozen=True, slots=True)
class CatalogSection:
    """Titled bucket of catalog items."""

    title: str
    items: tuple[CatalogItem, ...]


def section_title(item: CatalogItem, mode: GroupBy) -> str:
    """Return the title of the section ``item`` belongs to under ``mode``."""

    if mode.kind is GroupByKind.TAG:
        if mode.tag is None:
            return OTHER_SECTION_TITLE
        return item.tags.get(mode.tag, OTHER_SECTION_TITLE)
    if item.mod is None:
        return OTHER_SECTION_TITLE
    return item.mod.display_name or OTHER_SECTION_TITLE


def _section_order(section: CatalogSection) -> tuple[bool, str]:
    """Sort ascending by title with the ``Other`` bucket after everything else."""

    return section.title == OTHER_SECTION_TITLE, section.title


def group_items(items: Iterable[CatalogItem], mode: GroupBy) -> list[CatalogSection]:
    """Partition ``items`` into sections according to ``mode``.

    Items keep their input order inside a section. Sections are ordered by
    title except ``Other``, which always comes last; an item whose tag value is
    literally ``Other`` joins that same bucket.

    Args:
        items: Items to partition.
        mode: Grouping mode.

    Returns:
        list[CatalogSection]: Ordered sections.
    """

    buckets: dict[str, list[CatalogItem]] = {}
    for item in items:
        buckets.setdefault(section_title(item, mode), []).append(item)
    sections = [CatalogSection(title=title, items=tuple(members)) for title, members in buckets.items()]
    return sorted(sections, key=_section_order)


__all__ = ["CatalogSection", "GroupBy", "GroupByKind", "group_items", "section_title"]
