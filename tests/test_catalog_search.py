# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for catalog search, quick-filter tags and breadcrumb ordering."""

from __future__ import annotations

import pytest

from dashq.catalog import (
    CatalogItem,
    breadcrumb_parts,
    breadcrumb_sort_key,
    build_catalog_index,
    merge_tag_into_search,
    quick_filter_tags,
    search_catalog,
    sort_search_results,
)
from dashq.catalog.search import filter_items, searchable_text, tokenize_query


@pytest.fixture
def index(catalog_items, catalog_metadata):
    return build_catalog_index(catalog_items, catalog_metadata)


def _names(items) -> list[str]:
    return [item.full_name for item in items]


def test_blank_query_lists_top_level(index) -> None:
    assert _names(search_catalog(index, "")) == _names(index.top_level)
    assert _names(search_catalog(index, "   ")) == _names(index.top_level)
    assert _names(search_catalog(index, None)) == _names(index.top_level)


def test_query_searches_nested_items(index) -> None:
    results = search_catalog(index, "iam")

    assert _names(results) == ["aws.benchmark.cis_section_1"]


def test_query_parts_must_all_match(index) -> None:
    assert _names(search_catalog(index, "aws cis")) == ["aws.benchmark.cis"]


def test_query_matches_mod_name_and_tags(index) -> None:
    assert _names(search_catalog(index, "kubernetes")) == ["k8s.dashboard.pods"]
    assert _names(search_catalog(index, "type=report")) == ["local.dashboard.overview"]


def test_query_is_case_and_whitespace_insensitive(index) -> None:
    assert _names(search_catalog(index, "AWS   Compliance")) == _names(search_catalog(index, "aws compliance"))
    assert tokenize_query("  Foo   BAR ") == ("foo", "bar")


def test_searchable_text_layout(index) -> None:
    text = searchable_text(index.get("aws.benchmark.cis"))

    assert text == "aws compliance cis v1.4 service=aws category=compliance"


def test_search_results_sort_by_breadcrumb(index) -> None:
    results = sort_search_results(search_catalog(index, "aws"), index.by_id)

    assert _names(results) == [
        "aws.benchmark.cis",
        "aws.benchmark.cis_section_1",
        "local.dashboard.overview",
    ]


def test_breadcrumb_key_and_parts(index) -> None:
    nested = index.get("aws.benchmark.cis_section_1")

    assert breadcrumb_sort_key(nested, index.by_id) == "cis v1.4 > section 1 iam"
    assert _names(breadcrumb_parts(nested, index.by_id)) == ["aws.benchmark.cis", "aws.benchmark.cis_section_1"]
    assert breadcrumb_sort_key(index.get("local.dashboard.overview"), index.by_id) == "overview"


def test_breadcrumb_drops_unknown_ancestors() -> None:
    item = CatalogItem(full_name="b", kind="benchmark", title="Child", trunks=(("missing", "b"),))

    assert breadcrumb_sort_key(item, {"b": item}) == "child"


def test_sort_is_stable_for_equal_keys() -> None:
    first = CatalogItem(full_name="one", title="Same")
    second = CatalogItem(full_name="two", title="same")

    assert _names(sort_search_results([first, second], {})) == ["one", "two"]
    assert _names(sort_search_results([second, first], {})) == ["two", "one"]


def test_quick_filter_tags_respects_keys(index) -> None:
    item = index.get("local.dashboard.overview")

    assert quick_filter_tags(item, ("category", "service", "type")) == [("service", "aws"), ("type", "Report")]
    assert quick_filter_tags(item, ("category",)) == []


def test_merge_tag_into_search() -> None:
    assert merge_tag_into_search("", "aws") == "aws"
    assert merge_tag_into_search("cis ", "aws") == "cis aws"
    assert merge_tag_into_search("my aws query", "aws") == "my aws query"


@pytest.mark.parametrize("query", ["aws", "aws compliance", "IAM", "service=kubernetes", "zzz"])
def test_searching_results_again_is_idempotent(index, query: str) -> None:
    results = search_catalog(index, query)

    assert _names(filter_items(results, query)) == _names(results)
