# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Boolean filter expression trees used to narrow check results."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Annotated, Final, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ..catalog.types import JSONValue
from ..errors import FilterParseError

AND_OPERATOR: Final[str] = "and"
EQUAL_OPERATOR: Final[str] = "equal"
EXPRESSIONS_KEY: Final[str] = "expressions"


class FilterLeaf(BaseModel):
    """Single equality test between a field and a value.

    ``key`` narrows keyed field types (for example a tag name within the
    control tag namespace); ``title`` is the display label of ``value``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    operator: Literal["equal"] = "equal"
    type: str | None = None
    key: str | None = None
    value: str | None = None
    title: str | None = None


class FilterGroup(BaseModel):
    """AND-combination of child expressions; the only valid root of a filter."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    operator: Literal["and"] = "and"
    children: tuple[FilterExpression, ...] = Field(default_factory=tuple, alias=EXPRESSIONS_KEY)

    def with_children(self, children: tuple[FilterExpression, ...]) -> FilterGroup:
        """Return a copy of the group holding ``children``."""

        return self.model_copy(update={"children": children})


FilterExpression: TypeAlias = Annotated[FilterGroup | FilterLeaf, Field(discriminator="operator")]

FilterGroup.model_rebuild()

_EXPRESSION_ADAPTER: TypeAdapter[FilterGroup | FilterLeaf] = TypeAdapter(FilterExpression)


def default_leaf() -> FilterLeaf:
    """Return an equality leaf with every field unset."""

    return FilterLeaf()


def default_filter() -> FilterGroup:
    """Return the reset tree: one unset leaf inside an ``and`` group."""

    return FilterGroup(children=(default_leaf(),))


def filter_to_payload(expression: FilterGroup | FilterLeaf) -> dict[str, JSONValue]:
    """Return the JSON payload of ``expression`` with unset fields omitted."""

    return expression.model_dump(mode="json", by_alias=True, exclude_none=True)


def serialize_filter(expression: FilterGroup | FilterLeaf) -> str:
    """Return the canonical JSON text of ``expression``.

    Two trees serialise identically exactly when they are structurally equal,
    children order included.
    """

    return json.dumps(filter_to_payload(expression), separators=(",", ":"), ensure_ascii=False)


def parse_filter(payload: Mapping[str, JSONValue] | JSONValue) -> FilterGroup | FilterLeaf:
    """Parse a JSON payload into a filter expression.

    Args:
        payload: Raw JSON payload using the ``operator``/``expressions`` layout.

    Returns:
        FilterGroup | FilterLeaf: Parsed expression.

    Raises:
        FilterParseError: If the payload does not describe a filter expression.
    """

    try:
        return _EXPRESSION_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise FilterParseError(f"invalid filter expression: {exc}") from exc


def parse_filter_root(payload: Mapping[str, JSONValue] | JSONValue) -> FilterGroup:
    """Parse a payload that must describe a root ``and`` group.

    Raises:
        FilterParseError: If the payload is invalid or its root is not a group.
    """

    expression = parse_filter(payload)
    if not isinstance(expression, FilterGroup):
        raise FilterParseError("filter root must be an 'and' group")
    return expression


__all__ = [
    "AND_OPERATOR",
    "EQUAL_OPERATOR",
    "EXPRESSIONS_KEY",
    "FilterExpression",
    "FilterGroup",
    "FilterLeaf",
    "default_filter",
    "default_leaf",
    "filter_to_payload",
    "parse_filter",
    "parse_filter_root",
    "serialize_filter",
]
