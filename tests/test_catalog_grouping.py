# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for grouping catalog items into sections."""

from __future__ import annotations

import pytest

from dashq.catalog import CatalogItem, GroupBy, build_catalog_index, group_items


def _layout(sections) -> list[tuple[str, list[str]]]:
    return [(section.title, [item.full_name for item in section.items]) for section in sections]


def test_group_by_tag_puts_other_last(catalog_items, catalog_metadata) -> None:
    index = build_catalog_index(catalog_items, catalog_metadata)

    sections = group_items(index.top_level, GroupBy.by_tag("service"))

    assert _layout(sections) == [
        ("aws", ["local.dashboard.overview", "aws.benchmark.cis"]),
        ("kubernetes", ["k8s.dashboard.pods"]),
        ("Other", ["other.dashboard.unowned"]),
    ]


def test_group_by_mod_uses_display_name(catalog_items, catalog_metadata) -> None:
    index = build_catalog_index(catalog_items, catalog_metadata)

    sections = group_items(index.top_level, GroupBy.by_mod())

    assert [section.title for section in sections] == ["AWS Compliance", "Local Mod", "kubernetes", "Other"]


def test_literal_other_tag_shares_the_fallback_bucket() -> None:
    tagged = CatalogItem(full_name="a", tags={"service": "Other"})
    untagged = CatalogItem(full_name="b")
    zeta = CatalogItem(full_name="c", tags={"service": "zeta"})

    sections = group_items([tagged, zeta, untagged], GroupBy.by_tag("service"))

    assert _layout(sections) == [("zeta", ["c"]), ("Other", ["a", "b"])]


def test_group_items_of_nothing_is_empty() -> None:
    assert group_items([], GroupBy.by_mod()) == []


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("mod", GroupBy.by_mod()), ("tag:service", GroupBy.by_tag("service")), (" tag: category ", GroupBy.by_tag("category"))],
)
def test_group_by_parse(raw: str, expected: GroupBy) -> None:
    assert GroupBy.parse(raw) == expected


@pytest.mark.parametrize("raw", ["", "tag:", "service", "mods"])
def test_group_by_parse_rejects_unknown_modes(raw: str) -> None:
    with pytest.raises(ValueError):
        GroupBy.parse(raw)


def test_group_by_round_trips_through_str() -> None:
    assert str(GroupBy.by_tag("service")) == "tag:service"
    assert str(GroupBy.by_mod()) == "mod"
