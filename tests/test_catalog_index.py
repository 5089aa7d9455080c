# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for catalog models and indexing."""

from __future__ import annotations

from dashq.catalog import EMPTY_INDEX, CatalogItem, CatalogMetadata, OwningGroup, build_catalog_index


def test_index_annotates_owning_group(catalog_items, catalog_metadata) -> None:
    index = build_catalog_index(catalog_items, catalog_metadata)

    assert index.get("local.dashboard.overview").mod.display_name == "Local Mod"
    assert index.get("aws.benchmark.cis").mod.display_name == "AWS Compliance"
    assert index.get("k8s.dashboard.pods").mod.display_name == "kubernetes"
    assert index.get("other.dashboard.unowned").mod == OwningGroup()


def test_index_lists_top_level_in_catalog_order(catalog_items, catalog_metadata) -> None:
    index = build_catalog_index(catalog_items, catalog_metadata)

    assert [item.full_name for item in index.top_level] == [
        "local.dashboard.overview",
        "aws.benchmark.cis",
        "k8s.dashboard.pods",
        "other.dashboard.unowned",
    ]
    assert len(index) == 5


def test_index_reports_tag_keys_in_first_seen_order(catalog_items, catalog_metadata) -> None:
    received: list[tuple[str, ...]] = []

    index = build_catalog_index(catalog_items, catalog_metadata, on_tag_keys=received.append)

    assert index.tag_keys == ("service", "type", "category")
    assert received == [("service", "type", "category")]


def test_index_missing_inputs_is_empty() -> None:
    metadata = CatalogMetadata()

    assert build_catalog_index(None, metadata) is EMPTY_INDEX
    assert build_catalog_index([CatalogItem(full_name="a")], None) is EMPTY_INDEX


def test_index_skips_duplicate_ids(catalog_metadata) -> None:
    first = CatalogItem(full_name="dup", title="First", is_top_level=True)
    second = CatalogItem(full_name="dup", title="Second", is_top_level=True)

    index = build_catalog_index([first, second], catalog_metadata)

    assert len(index) == 1
    assert index.get("dup").title == "First"


def test_index_does_not_mutate_inputs(catalog_items, catalog_metadata) -> None:
    build_catalog_index(catalog_items, catalog_metadata)

    assert all(item.mod is None for item in catalog_items)


def test_catalog_item_coerces_payload() -> None:
    item = CatalogItem.model_validate(
        {"full_name": "x", "type": "snapshot", "tags": {"n": 3, "gone": None}, "trunks": None, "extra": 1},
    )

    assert item.kind == "snapshot"
    assert item.tags == {"n": "3"}
    assert item.trunks == ()
    assert item.display_name == ""


def test_display_name_prefers_title_then_short_name() -> None:
    assert CatalogItem(full_name="a", title="Title", short_name="short").display_name == "Title"
    assert CatalogItem(full_name="a", short_name="short").display_name == "short"


def test_metadata_resolves_current_mod_first() -> None:
    metadata = CatalogMetadata.model_validate(
        {
            "mod": {"full_name": "mod.a", "title": "Current"},
            "installed_mods": {"mod.a": {"full_name": "mod.a", "title": "Installed"}},
        },
    )

    assert metadata.resolve_group("mod.a").title == "Current"
    assert metadata.resolve_group(None) == OwningGroup()
    assert metadata.resolve_group("mod.unknown") == OwningGroup()
