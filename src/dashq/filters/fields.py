# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Selectable filter fields derived from observed value statistics.

The value context maps each field type name to its statistics. Three shapes
are recognised:

* ``{"ok": 3, "alarm": 0}`` for status-like types (value to count);
* ``{"key": {"service": {"aws/ec2": 4}}}`` for keyed types (key, value, count);
* ``{"value": {"id": {"title": "...", "count": 2}}}`` or
  ``{"value": {"id": 2}}`` for every other type.

A type is keyed when its entry exposes a ``key`` mapping. New field types
only need new context entries: labels fall back to the type name and value
resolution follows the shape of the entry.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Final, TypeAlias

from ..catalog.types import JSONValue
from .expression import FilterGroup, FilterLeaf

LOGGER = logging.getLogger(__name__)

ValueContext: TypeAlias = Mapping[str, JSONValue]

TOKEN_SEPARATOR: Final[str] = "|"
KEY_ENTRY: Final[str] = "key"
VALUE_ENTRY: Final[str] = "value"
TITLE_ENTRY: Final[str] = "title"
COUNT_ENTRY: Final[str] = "count"

FIELD_TYPE_LABELS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "benchmark": "Benchmark",
        "control": "Control",
        "control_tag": "Control Tag",
        "dimension": "Dimension",
        "reason": "Reason",
        "resource": "Resource",
        "severity": "Severity",
        "status": "Status",
    },
)
DEFAULT_STATUS_TYPES: Final[frozenset[str]] = frozenset({"status"})
DEFAULT_REFERENCE_TYPES: Final[frozenset[str]] = frozenset({"benchmark", "control"})
DEFAULT_REPEATABLE_TYPES: Final[frozenset[str]] = frozenset({"dimension", "control_tag"})


class ValueResolution(str, Enum):
    """Strategy used to list the selectable values of a field type."""

    STATUS = "status"
    KEYED = "keyed"
    REFERENCE = "reference"
    PLAIN = "plain"


@dataclass(frozen=True, slots=True)
class FieldCatalogSettings:
    """Tunable classification of field types."""

    status_types: frozenset[str] = DEFAULT_STATUS_TYPES
    reference_types: frozenset[str] = DEFAULT_REFERENCE_TYPES
    repeatable_types: frozenset[str] = DEFAULT_REPEATABLE_TYPES
    labels: Mapping[str, str] = field(default_factory=dict)

    def label_for(self, field_type: str) -> str:
        """Return the display label of ``field_type``."""

        if field_type in self.labels:
            return self.labels[field_type]
        if field_type in FIELD_TYPE_LABELS:
            return FIELD_TYPE_LABELS[field_type]
        return field_type.replace("_", " ").title()


DEFAULT_SETTINGS = FieldCatalogSettings()


@dataclass(frozen=True, slots=True)
class FieldType:
    """Catalog entry describing one selectable field type."""

    name: str
    label: str
    keyed: bool
    keys: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class FieldTypeOption:
    """Selectable entry of the field type menu.

    Keyed types contribute one option per observed key whose ``value`` is the
    composite ``<type>|<key>`` token; other types contribute a single option
    whose ``value`` is the type name.
    """

    value: str
    label: str
    field_type: str
    key: str | None = None
    group: str | None = None


@dataclass(frozen=True, slots=True)
class FieldValueOption:
    """Selectable value of a field together with how often it was observed."""

    value: str
    label: str
    occurrences: int | float


def make_field_token(field_type: str, key: str | None = None) -> str:
    """Return the option token for ``field_type`` and an optional ``key``."""

    return f"{field_type}{TOKEN_SEPARATOR}{key}" if key else field_type


def parse_field_token(token: str) -> tuple[str, str | None]:
    """Split an option token into its field type and optional key.

    Args:
        token: Field type name or composite ``<type>|<key>`` token.

    Returns:
        tuple[str, str | None]: Field type and key; the key is ``None`` for
        plain type names.
    """

    if TOKEN_SEPARATOR not in token:
        return token, None
    field_type, key = token.split(TOKEN_SEPARATOR, 1)
    return field_type, key


def _as_mapping(value: JSONValue | None) -> Mapping[str, JSONValue] | None:
    return value if isinstance(value, Mapping) else None


def _as_count(raw: JSONValue) -> int | float | None:
    """Return the occurrence count carried by ``raw`` or ``None``.

    Counts keep their JSON number type. Non-finite numbers (``NaN`` and
    ``Infinity`` are accepted by the JSON loader) carry no count.
    """

    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return raw if math.isfinite(raw) else None
    if isinstance(raw, Mapping):
        return _as_count(raw.get(COUNT_ENTRY))
    return None


@dataclass(frozen=True, slots=True)
class FieldCatalog:
    """Capability table of field types built from one value context snapshot."""

    context: ValueContext
    settings: FieldCatalogSettings = DEFAULT_SETTINGS
    _types: Mapping[str, FieldType] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Classify every context entry into a :class:`FieldType`."""

        if not isinstance(self.context, Mapping):
            LOGGER.debug("ignoring value context of type %s", type(self.context).__name__)
            object.__setattr__(self, "context", MappingProxyType({}))
        types: dict[str, FieldType] = {}
        for name, entry in self.context.items():
            mapping = _as_mapping(entry)
            keyed_entry = _as_mapping(mapping.get(KEY_ENTRY)) if mapping is not None else None
            types[name] = FieldType(
                name=name,
                label=self.settings.label_for(name),
                keyed=keyed_entry is not None,
                keys=tuple(keyed_entry) if keyed_entry is not None else (),
            )
        object.__setattr__(self, "_types", MappingProxyType(types))
        LOGGER.debug("field catalog built with %d field types", len(types))

    @classmethod
    def from_context(
        cls,
        context: ValueContext | None,
        settings: FieldCatalogSettings | None = None,
    ) -> FieldCatalog:
        """Build a catalog, treating a missing or non-mapping context as empty."""

        return cls(context=context or {}, settings=settings or DEFAULT_SETTINGS)

    @property
    def field_types(self) -> tuple[FieldType, ...]:
        """Return the field types in context order."""

        return tuple(self._types.values())

    def field_type(self, name: str | None) -> FieldType | None:
        """Return the field type registered as ``name`` if any."""

        if name is None:
            return None
        return self._types.get(name)

    def options(self) -> tuple[FieldTypeOption, ...]:
        """Return every selectable field type option ordered by label."""

        options: list[FieldTypeOption] = []
        for field_type in self._types.values():
            if not field_type.keyed:
                options.append(
                    FieldTypeOption(value=field_type.name, label=field_type.label, field_type=field_type.name),
                )
                continue
            for key in field_type.keys:
                options.append(
                    FieldTypeOption(
                        value=make_field_token(field_type.name, key),
                        label=key,
                        field_type=field_type.name,
                        key=key,
                        group=field_type.label,
                    ),
                )
        return tuple(sorted(options, key=_option_order))

    def option_for(self, leaf: FilterLeaf) -> FieldTypeOption | None:
        """Return the option currently selected by ``leaf`` if it is known."""

        if not leaf.type:
            return None
        token = make_field_token(leaf.type, leaf.key)
        for option in self.options():
            if option.value == token:
                return option
        return None

    def selectable_options(self, group: FilterGroup, leaf: FilterLeaf | None = None) -> tuple[FieldTypeOption, ...]:
        """Return the options offered when editing ``leaf`` inside ``group``.

        A type already used within the group is hidden unless it is the type
        of ``leaf`` itself or a repeatable keyed type.

        Args:
            group: Group containing the leaf being edited.
            leaf: Leaf being edited, or ``None`` for a new leaf.

        Returns:
            tuple[FieldTypeOption, ...]: Options that may be selected.
        """

        used = _used_types(group)
        current = leaf.type if leaf is not None else None
        return tuple(
            option
            for option in self.options()
            if option.field_type == current
            or option.field_type in self.settings.repeatable_types
            or option.field_type not in used
        )

    def keys(self, field_type: str | None) -> tuple[str, ...]:
        """Return the observed keys of a keyed ``field_type``."""

        resolved = self.field_type(field_type)
        return resolved.keys if resolved is not None else ()

    def resolution(self, field_type: str) -> ValueResolution:
        """Return how values of ``field_type`` are resolved."""

        if field_type in self.settings.status_types:
            return ValueResolution.STATUS
        resolved = self._types.get(field_type)
        if resolved is not None and resolved.keyed:
            return ValueResolution.KEYED
        if field_type in self.settings.reference_types:
            return ValueResolution.REFERENCE
        return ValueResolution.PLAIN

    def values(self, field_type: str | None, key: str | None = None) -> tuple[FieldValueOption, ...]:
        """Return the selectable values of ``field_type``.

        Args:
            field_type: Field type whose values are requested.
            key: Key scoping the values of keyed field types.

        Returns:
            tuple[FieldValueOption, ...]: Values in context order; empty when
            the type or key is unknown.
        """

        if not field_type:
            return ()
        entry = _as_mapping(self.context.get(field_type))
        if entry is None:
            return ()
        strategy = self.resolution(field_type)
        if strategy is ValueResolution.STATUS:
            return tuple(option for option in _plain_values(entry) if option.occurrences > 0)
        if strategy is ValueResolution.KEYED:
            keyed = _as_mapping(entry.get(KEY_ENTRY)) or {}
            scoped = _as_mapping(keyed.get(key)) if key is not None else None
            return _plain_values(scoped) if scoped is not None else ()
        values = _as_mapping(entry.get(VALUE_ENTRY))
        if values is None:
            values = entry
        if strategy is ValueResolution.REFERENCE:
            return _reference_values(values)
        return _plain_values(values)


def _option_order(option: FieldTypeOption) -> tuple[str, str, str]:
    group = option.group or option.label
    return group.lower(), option.field_type, option.label.lower()


def _used_types(group: FilterGroup) -> set[str]:
    return {child.type for child in group.children if isinstance(child, FilterLeaf) and child.type}


def _plain_values(values: Mapping[str, JSONValue]) -> tuple[FieldValueOption, ...]:
    """Return identifier-labelled values with their counts."""

    options: list[FieldValueOption] = []
    for value, raw in values.items():
        count = _as_count(raw)
        if count is None:
            LOGGER.debug("dropping value %r without an occurrence count", value)
            continue
        options.append(FieldValueOption(value=value, label=value, occurrences=count))
    return tuple(options)


def _reference_values(values: Mapping[str, JSONValue]) -> tuple[FieldValueOption, ...]:
    """Return identifier to display-title pairs with their counts."""

    options: list[FieldValueOption] = []
    for value, raw in values.items():
        count = _as_count(raw)
        if count is None:
            LOGGER.debug("dropping reference %r without an occurrence count", value)
            continue
        details = _as_mapping(raw)
        title = details.get(TITLE_ENTRY) if details is not None else None
        label = title if isinstance(title, str) and title else value
        options.append(FieldValueOption(value=value, label=label, occurrences=count))
    return tuple(options)


def build_field_types(
    context: ValueContext | None,
    settings: FieldCatalogSettings | None = None,
) -> tuple[FieldTypeOption, ...]:
    """Return the selectable field type options for ``context``."""

    return FieldCatalog.from_context(context, settings).options()


def build_keys(context: ValueContext | None, field_type: str | None) -> tuple[str, ...]:
    """Return the observed keys of ``field_type`` in ``context``."""

    return FieldCatalog.from_context(context).keys(field_type)


def build_values(
    context: ValueContext | None,
    field_type: str | None,
    key: str | None = None,
    settings: FieldCatalogSettings | None = None,
) -> tuple[FieldValueOption, ...]:
    """Return the selectable values of ``field_type`` in ``context``."""

    return FieldCatalog.from_context(context, settings).values(field_type, key)


def settings_from_names(
    *,
    status_types: Collection[str] | None = None,
    reference_types: Collection[str] | None = None,
    repeatable_types: Collection[str] | None = None,
    labels: Mapping[str, str] | None = None,
) -> FieldCatalogSettings:
    """Return catalog settings from plain collections, keeping defaults for omissions."""

    return FieldCatalogSettings(
        status_types=frozenset(status_types) if status_types is not None else DEFAULT_STATUS_TYPES,
        reference_types=frozenset(reference_types) if reference_types is not None else DEFAULT_REFERENCE_TYPES,
        repeatable_types=frozenset(repeatable_types) if repeatable_types is not None else DEFAULT_REPEATABLE_TYPES,
        labels=MappingProxyType(dict(labels or {})),
    )


__all__ = [
    "DEFAULT_REPEATABLE_TYPES",
    "DEFAULT_SETTINGS",
    "FIELD_TYPE_LABELS",
    "FieldCatalog",
    "FieldCatalogSettings",
    "FieldType",
    "FieldTypeOption",
    "FieldValueOption",
    "ValueContext",
    "ValueResolution",
    "build_field_types",
    "build_keys",
    "build_values",
    "make_field_token",
    "parse_field_token",
    "settings_from_names",
]
