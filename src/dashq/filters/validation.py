# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Structural validity of filter expressions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from pydantic import BaseModel

from ..catalog.types import JSONValue
from .expression import AND_OPERATOR, EQUAL_OPERATOR, EXPRESSIONS_KEY, filter_to_payload


@dataclass(frozen=True, slots=True)
class FilterValidity:
    """Outcome of validating a filter expression.

    Attributes:
        valid: ``True`` when the expression may be applied.
        reason: Location and cause of the first problem found; empty when valid.
    """

    valid: bool
    reason: str = ""

    def __bool__(self) -> bool:
        return self.valid


VALID = FilterValidity(valid=True)


def check_filter(expression: BaseModel | Mapping[str, JSONValue] | JSONValue) -> FilterValidity:
    """Validate ``expression`` and explain the first problem found.

    Accepts parsed models as well as raw JSON payloads, so unknown operators
    or malformed nodes report invalid instead of raising.

    Args:
        expression: Filter model or raw payload.

    Returns:
        FilterValidity: Validity flag with an optional reason.
    """

    payload = filter_to_payload(expression) if isinstance(expression, BaseModel) else expression
    return _check_node(payload, path="filter")


def validate_filter(expression: BaseModel | Mapping[str, JSONValue] | JSONValue) -> bool:
    """Return ``True`` when ``expression`` is structurally valid."""

    return check_filter(expression).valid


def _check_node(node: JSONValue, *, path: str) -> FilterValidity:
    """Validate one node of a raw filter payload."""

    if not isinstance(node, Mapping):
        return FilterValidity(valid=False, reason=f"{path}: expected an object")
    operator = node.get("operator")
    if operator == AND_OPERATOR:
        return _check_group(node, path=path)
    if operator == EQUAL_OPERATOR:
        return _check_leaf(node, path=path)
    return FilterValidity(valid=False, reason=f"{path}: unsupported operator {operator!r}")


def _check_group(node: Mapping[str, JSONValue], *, path: str) -> FilterValidity:
    """Validate an ``and`` group: at least one child, every child valid."""

    children = node.get(EXPRESSIONS_KEY)
    if not isinstance(children, Sequence) or isinstance(children, (str, bytes, bytearray)) or not children:
        return FilterValidity(valid=False, reason=f"{path}: group requires at least one expression")
    for position, child in enumerate(children):
        outcome = _check_node(child, path=f"{path}.{EXPRESSIONS_KEY}[{position}]")
        if not outcome.valid:
            return outcome
    return VALID


def _check_leaf(node: Mapping[str, JSONValue], *, path: str) -> FilterValidity:
    """Validate an ``equal`` leaf: both a value and a field type are required.

    A ``key`` never makes a leaf invalid on its own.
    """

    if not _has_text(node.get("value")):
        return FilterValidity(valid=False, reason=f"{path}: value is required")
    if not _has_text(node.get("type")):
        return FilterValidity(valid=False, reason=f"{path}: type is required")
    return VALID


def _has_text(value: JSONValue) -> bool:
    return isinstance(value, str) and bool(value.strip())


__all__ = ["VALID", "FilterValidity", "check_filter", "validate_filter"]
