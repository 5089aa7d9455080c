# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Check filter expressions, their validation, field catalog and editor."""

from __future__ import annotations

from typing import Final

from .editor import FilterEditor
from .expression import (
    FilterExpression,
    FilterGroup,
    FilterLeaf,
    default_filter,
    default_leaf,
    filter_to_payload,
    parse_filter,
    parse_filter_root,
    serialize_filter,
)
from .fields import (
    FieldCatalog,
    FieldCatalogSettings,
    FieldType,
    FieldTypeOption,
    FieldValueOption,
    ValueResolution,
    build_field_types,
    build_keys,
    build_values,
    make_field_token,
    parse_field_token,
)
from .io import load_filter_payload, load_value_context
from .validation import FilterValidity, check_filter, validate_filter

__all__: Final[tuple[str, ...]] = (
    "FieldCatalog",
    "FieldCatalogSettings",
    "FieldType",
    "FieldTypeOption",
    "FieldValueOption",
    "FilterEditor",
    "FilterExpression",
    "FilterGroup",
    "FilterLeaf",
    "FilterValidity",
    "ValueResolution",
    "build_field_types",
    "build_keys",
    "build_values",
    "check_filter",
    "default_filter",
    "default_leaf",
    "filter_to_payload",
    "load_filter_payload",
    "load_value_context",
    "make_field_token",
    "parse_field_token",
    "parse_filter",
    "parse_filter_root",
    "serialize_filter",
    "validate_filter",
)
