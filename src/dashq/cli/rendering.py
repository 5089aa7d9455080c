# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for the search and filter commands."""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..catalog import (
    CatalogItem,
    CatalogSection,
    CatalogView,
    breadcrumb_parts,
    quick_filter_tags,
)
from ..catalog.types import BREADCRUMB_SEPARATOR
from ..filters import FieldTypeOption, FieldValueOption

NO_RESULTS_MESSAGE = "No search results."
NO_ITEMS_MESSAGE = "No dashboards."
NOT_LOADED_MESSAGE = "Catalog not loaded: metadata is unavailable."


def breadcrumb_title(item: CatalogItem, index_by_id: Mapping[str, CatalogItem]) -> str:
    """Return the ``A > B > item`` title shown for a search match.

    Items without a resolvable trunk path show their own display name.
    """

    names = [part.display_name for part in breadcrumb_parts(item, index_by_id) if part.display_name]
    if not names or names[-1] != item.display_name:
        names.append(item.display_name)
    return BREADCRUMB_SEPARATOR.join(names)


def format_quick_tags(item: CatalogItem, keys: Collection[str]) -> str:
    return ", ".join(f"{key}={value}" for key, value in quick_filter_tags(item, keys))


def build_section_table(
    section: CatalogSection,
    view: CatalogView,
    quick_tag_keys: Collection[str],
) -> Table:
    """Return a rich table listing the items of one catalog section.

    Args:
        section: Section to render.
        view: View the section belongs to; supplies the index for breadcrumbs.
        quick_tag_keys: Tag keys offered as quick filters.

    Returns:
        Table: Rich table instance ready for rendering.
    """

    table = Table(title=Text(section.title), box=box.SIMPLE, expand=True, title_justify="left")
    table.add_column("Title", style="bold", overflow="fold")
    table.add_column("Kind")
    table.add_column("Name", overflow="fold")
    table.add_column("Tags", overflow="fold")

    for item in section.items:
        title = breadcrumb_title(item, view.index.by_id) if view.search_active else item.display_name
        table.add_row(
            Text(title),
            item.kind,
            Text(item.full_name),
            Text(format_quick_tags(item, quick_tag_keys) or "-"),
        )
    return table


def render_view(console: Console, view: CatalogView, quick_tag_keys: Collection[str]) -> None:
    """Render every section of ``view`` to ``console``."""

    for section in view.sections:
        console.print(build_section_table(section, view, quick_tag_keys))


def build_tag_keys_table(tag_keys: Sequence[str]) -> Table:
    table = Table(title="Tag Keys", box=box.SIMPLE, title_justify="left")
    table.add_column("Key", style="bold")
    for key in tag_keys:
        table.add_row(Text(key))
    return table


def build_field_types_table(options: Sequence[FieldTypeOption]) -> Table:
    """Return a rich table describing selectable field type options."""

    table = Table(title="Field Types", box=box.SIMPLE, title_justify="left")
    table.add_column("Token", style="bold")
    table.add_column("Label")
    table.add_column("Group")
    for option in options:
        table.add_row(Text(option.value), Text(option.label), option.group or "-")
    return table


def build_keys_table(field_type: str, keys: Sequence[str]) -> Table:
    table = Table(title=f"Keys of {field_type}", box=box.SIMPLE, title_justify="left")
    table.add_column("Key", style="bold")
    for key in keys:
        table.add_row(Text(key))
    return table


def build_values_table(title: str, values: Sequence[FieldValueOption]) -> Table:
    """Return a rich table listing selectable values with their counts."""

    table = Table(title=title, box=box.SIMPLE, title_justify="left")
    table.add_column("Value", style="bold", overflow="fold")
    table.add_column("Label", overflow="fold")
    table.add_column("Count", justify="right")
    for option in values:
        table.add_row(Text(option.value), Text(option.label), str(option.occurrences))
    return table


__all__ = [
    "NOT_LOADED_MESSAGE",
    "NO_ITEMS_MESSAGE",
    "NO_RESULTS_MESSAGE",
    "breadcrumb_title",
    "build_field_types_table",
    "build_keys_table",
    "build_section_table",
    "build_tag_keys_table",
    "build_values_table",
    "format_quick_tags",
    "render_view",
]
