# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read filter trees and value contexts from JSON documents."""

from __future__ import annotations

from pathlib import Path

from ..catalog.io import load_document, load_json_object
from ..catalog.types import JSONValue
from .fields import ValueContext


def load_filter_payload(path: Path) -> JSONValue:
    """Return the raw filter payload stored at ``path``.

    Raises:
        CatalogDocumentError: If the document is missing or not valid JSON.
    """

    return load_document(path)


def load_value_context(path: Path) -> ValueContext:
    """Return the value-statistics context stored at ``path``.

    Raises:
        CatalogDocumentError: If the document is missing or not a JSON object.
    """

    return load_json_object(path)


__all__ = ["load_filter_payload", "load_value_context"]
