# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading catalog and metadata JSON documents."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from ..errors import CatalogDocumentError
from .models import CatalogItem, CatalogMetadata
from .types import JSONValue

DASHBOARDS_KEY: Final[str] = "dashboards"
METADATA_KEY: Final[str] = "metadata"


@dataclass(frozen=True, slots=True)
class CatalogDocument:
    """Catalog items and optional metadata read from one document."""

    items: tuple[CatalogItem, ...]
    metadata: CatalogMetadata | None
    source: Path


def load_document(path: Path) -> JSONValue:
    """Load a JSON document from disk.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        JSONValue: Parsed JSON value.

    Raises:
        CatalogDocumentError: If the document is missing or is not valid JSON.
    """

    if not path.exists():
        raise CatalogDocumentError(f"{path}: document does not exist")
    with path.open("r", encoding="utf-8") as stream:
        try:
            return cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise CatalogDocumentError(f"{path}: failed to parse JSON ({exc.msg})") from exc


def load_json_object(path: Path) -> Mapping[str, JSONValue]:
    """Load ``path`` and ensure the payload is a JSON object.

    Raises:
        CatalogDocumentError: If the payload is not a JSON object.
    """

    payload = load_document(path)
    if not isinstance(payload, Mapping):
        raise CatalogDocumentError(f"{path}: expected a JSON object")
    return payload


def parse_catalog_items(payload: JSONValue, *, context: str) -> tuple[CatalogItem, ...]:
    """Parse catalog items from a list, or from a mapping keyed by full name.

    Args:
        payload: Raw ``dashboards`` value.
        context: Human-friendly prefix used in error messages.

    Returns:
        tuple[CatalogItem, ...]: Parsed items in document order.

    Raises:
        CatalogDocumentError: If an entry is not a valid catalog item.
    """

    if isinstance(payload, Mapping):
        entries: list[JSONValue] = []
        for full_name, entry in payload.items():
            if isinstance(entry, Mapping) and "full_name" not in entry:
                entry = {**entry, "full_name": full_name}
            entries.append(entry)
    elif isinstance(payload, Sequence) and not isinstance(payload, (str, bytes, bytearray)):
        entries = list(payload)
    else:
        raise CatalogDocumentError(f"{context}: expected '{DASHBOARDS_KEY}' to be a list or an object")

    items: list[CatalogItem] = []
    for position, entry in enumerate(entries):
        try:
            items.append(CatalogItem.model_validate(entry))
        except ValidationError as exc:
            raise CatalogDocumentError(f"{context}: invalid catalog item at position {position}: {exc}") from exc
    return tuple(items)


def parse_metadata(payload: JSONValue, *, context: str) -> CatalogMetadata:
    """Parse mod metadata.

    Raises:
        CatalogDocumentError: If ``payload`` is not valid metadata.
    """

    try:
        return CatalogMetadata.model_validate(payload)
    except ValidationError as exc:
        raise CatalogDocumentError(f"{context}: invalid metadata: {exc}") from exc


def load_catalog_document(path: Path) -> CatalogDocument:
    """Read catalog items and optional embedded metadata from ``path``.

    Args:
        path: JSON document holding ``dashboards`` and optionally ``metadata``.

    Returns:
        CatalogDocument: Parsed document.

    Raises:
        CatalogDocumentError: If the document is unreadable or malformed.
    """

    document = load_json_object(path)
    context = str(path)
    items = parse_catalog_items(document.get(DASHBOARDS_KEY, []), context=context)
    raw_metadata = document.get(METADATA_KEY)
    metadata = parse_metadata(raw_metadata, context=context) if raw_metadata is not None else None
    return CatalogDocument(items=items, metadata=metadata, source=path)


def load_metadata(path: Path) -> CatalogMetadata:
    """Read standalone mod metadata from ``path``."""

    return parse_metadata(load_json_object(path), context=str(path))


__all__ = [
    "CatalogDocument",
    "load_catalog_document",
    "load_document",
    "load_json_object",
    "load_metadata",
    "parse_catalog_items",
    "parse_metadata",
]
