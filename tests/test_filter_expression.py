# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for filter expression models and structural validation."""

from __future__ import annotations

import pytest

from dashq.errors import FilterParseError
from dashq.filters import (
    FilterGroup,
    FilterLeaf,
    check_filter,
    default_filter,
    filter_to_payload,
    parse_filter,
    parse_filter_root,
    serialize_filter,
    validate_filter,
)


def _leaf(**fields: str) -> dict[str, str]:
    return {"operator": "equal", **fields}


def test_default_filter_payload() -> None:
    assert filter_to_payload(default_filter()) == {"operator": "and", "expressions": [{"operator": "equal"}]}


def test_default_filter_is_invalid() -> None:
    verdict = check_filter(default_filter())

    assert not verdict
    assert verdict.reason == "filter.expressions[0]: value is required"


@pytest.mark.parametrize(
    "payload",
    [
        {"operator": "and", "expressions": [_leaf(type="status", value="alarm")]},
        {"operator": "and", "expressions": [_leaf(type="control_tag", key="service", value="aws")]},
        {
            "operator": "and",
            "expressions": [
                _leaf(type="status", value="ok"),
                {"operator": "and", "expressions": [_leaf(type="severity", value="high")]},
            ],
        },
    ],
)
def test_valid_filters(payload) -> None:
    assert validate_filter(payload)


@pytest.mark.parametrize(
    ("payload", "reason"),
    [
        ({"operator": "and", "expressions": []}, "filter: group requires at least one expression"),
        ({"operator": "and"}, "filter: group requires at least one expression"),
        ({"operator": "and", "expressions": [_leaf(type="status")]}, "filter.expressions[0]: value is required"),
        ({"operator": "and", "expressions": [_leaf(value="ok")]}, "filter.expressions[0]: type is required"),
        ({"operator": "or", "expressions": [_leaf(type="status", value="ok")]}, "filter: unsupported operator 'or'"),
        ("not an object", "filter: expected an object"),
        (
            {"operator": "and", "expressions": [_leaf(type="status", value="ok"), {"operator": "and", "expressions": []}]},
            "filter.expressions[1]: group requires at least one expression",
        ),
    ],
)
def test_invalid_filters(payload, reason: str) -> None:
    verdict = check_filter(payload)

    assert not verdict.valid
    assert verdict.reason == reason


def test_key_alone_does_not_invalidate_leaf() -> None:
    assert validate_filter(FilterGroup(children=(FilterLeaf(type="status", key="unused", value="ok"),)))


def test_parse_filter_round_trips_wire_layout() -> None:
    payload = {"operator": "and", "expressions": [_leaf(type="benchmark", value="aws.cis", title="CIS")]}

    expression = parse_filter_root(payload)

    assert isinstance(expression.children[0], FilterLeaf)
    assert expression.children[0].title == "CIS"
    assert filter_to_payload(expression) == payload


def test_parse_filter_rejects_unknown_operator() -> None:
    with pytest.raises(FilterParseError):
        parse_filter({"operator": "or"})


def test_parse_filter_root_requires_group() -> None:
    with pytest.raises(FilterParseError, match="root"):
        parse_filter_root(_leaf(type="status", value="ok"))


def test_serialize_filter_tracks_child_order() -> None:
    first = FilterLeaf(type="status", value="ok")
    second = FilterLeaf(type="severity", value="high")

    assert serialize_filter(FilterGroup(children=(first, second))) != serialize_filter(
        FilterGroup(children=(second, first)),
    )
    assert serialize_filter(FilterGroup(children=(first,))) == serialize_filter(FilterGroup(children=(first,)))
