# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Editing session for a check filter tree."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .expression import (
    FilterExpression,
    FilterGroup,
    FilterLeaf,
    default_filter,
    default_leaf,
    serialize_filter,
)
from .fields import FieldCatalog, FieldTypeOption, parse_field_token
from .validation import FilterValidity, check_filter

LOGGER = logging.getLogger(__name__)

ApplyListener = Callable[[FilterGroup], None]


class FilterEditor:
    """Stage edits to a working copy of a committed filter tree.

    Edits only touch the working tree. :meth:`apply` hands the working tree to
    the ``on_apply`` listener; the tree the collaborator commits in response is
    fed back through :meth:`receive`, which is what clears the dirty state.
    :meth:`clear` resets and applies in one step.
    """

    def __init__(self, committed: FilterGroup | None = None, *, on_apply: ApplyListener | None = None) -> None:
        """Initialise the session from the last committed tree.

        Args:
            committed: Tree currently in effect; defaults to one unset leaf.
            on_apply: Listener receiving trees committed by :meth:`apply` and
                :meth:`clear`.
        """

        self._committed = committed if committed is not None else default_filter()
        self._working = self._committed
        self._on_apply = on_apply

    @property
    def committed(self) -> FilterGroup:
        """Return the last tree supplied by the collaborator."""

        return self._committed

    @property
    def working(self) -> FilterGroup:
        """Return the tree being edited."""

        return self._working

    @property
    def children(self) -> tuple[FilterExpression, ...]:
        """Return the children of the working tree."""

        return self._working.children

    @property
    def dirty(self) -> bool:
        """Return ``True`` when the working tree differs from the committed one."""

        return serialize_filter(self._working) != serialize_filter(self._committed)

    @property
    def validity(self) -> FilterValidity:
        """Return the validity of the working tree."""

        return check_filter(self._working)

    @property
    def valid(self) -> bool:
        """Return ``True`` when the working tree may be applied."""

        return self.validity.valid

    @property
    def can_apply(self) -> bool:
        """Return ``True`` when :meth:`apply` would commit the working tree."""

        return self.valid

    @property
    def can_remove(self) -> bool:
        """Return ``True`` when removing a child should be offered."""

        return len(self._working.children) > 1

    def receive(self, committed: FilterGroup) -> None:
        """Reflect a tree committed by the collaborator.

        The working tree is replaced only when ``committed`` differs from the
        previously committed tree, so pending edits survive a redundant push.
        """

        if serialize_filter(committed) == serialize_filter(self._committed):
            return
        self._committed = committed
        self._working = committed

    def add(self) -> FilterGroup:
        """Append an unset equality leaf to the working tree."""

        return self._replace_children((*self._working.children, default_leaf()))

    def remove(self, index: int) -> FilterGroup:
        """Remove the child at ``index``; out-of-range indexes leave the tree as is."""

        children = self._working.children
        if not 0 <= index < len(children):
            LOGGER.debug("ignoring removal of missing filter child %d", index)
            return self._working
        return self._replace_children((*children[:index], *children[index + 1 :]))

    def update(self, index: int, expression: FilterExpression) -> FilterGroup:
        """Replace the child at ``index`` with ``expression``."""

        children = self._working.children
        if not 0 <= index < len(children):
            LOGGER.debug("ignoring update of missing filter child %d", index)
            return self._working
        return self._replace_children((*children[:index], expression, *children[index + 1 :]))

    def reorder(self, children: Sequence[FilterExpression]) -> FilterGroup:
        """Replace the children with ``children`` as arranged by the caller."""

        return self._replace_children(tuple(children))

    def select_type(self, index: int, token: str) -> FilterGroup:
        """Select a field type option for the leaf at ``index``.

        ``token`` is either a type name or a composite ``<type>|<key>`` token.
        The leaf's value is reset because it belonged to the previous type.
        """

        leaf = self._leaf_at(index)
        if leaf is None:
            return self._working
        field_type, key = parse_field_token(token)
        return self.update(
            index,
            leaf.model_copy(update={"type": field_type, "key": key, "value": "", "title": None}),
        )

    def select_key(self, index: int, key: str | None) -> FilterGroup:
        """Select the key of a keyed field type for the leaf at ``index``."""

        leaf = self._leaf_at(index)
        if leaf is None:
            return self._working
        return self.update(index, leaf.model_copy(update={"key": key}))

    def select_value(self, index: int, value: str, title: str | None = None) -> FilterGroup:
        """Select the value (and its display title) of the leaf at ``index``."""

        leaf = self._leaf_at(index)
        if leaf is None:
            return self._working
        return self.update(index, leaf.model_copy(update={"value": value, "title": title}))

    def selectable_options(self, index: int, catalog: FieldCatalog) -> tuple[FieldTypeOption, ...]:
        """Return the field type options offered for the leaf at ``index``."""

        return catalog.selectable_options(self._working, self._leaf_at(index))

    def apply(self) -> FilterGroup | None:
        """Commit the working tree to the collaborator.

        Returns:
            FilterGroup | None: The committed tree, or ``None`` when the
            working tree is invalid and nothing was committed.
        """

        validity = self.validity
        if not validity.valid:
            LOGGER.debug("apply skipped for invalid filter: %s", validity.reason)
            return None
        self._emit(self._working)
        return self._working

    def clear(self) -> FilterGroup:
        """Reset the working tree to a single unset leaf and commit it."""

        self._working = default_filter()
        self._emit(self._working)
        return self._working

    def _emit(self, tree: FilterGroup) -> None:
        if self._on_apply is not None:
            self._on_apply(tree)

    def _leaf_at(self, index: int) -> FilterLeaf | None:
        children = self._working.children
        if not 0 <= index < len(children):
            return None
        child = children[index]
        return child if isinstance(child, FilterLeaf) else None

    def _replace_children(self, children: tuple[FilterExpression, ...]) -> FilterGroup:
        self._working = self._working.with_children(children)
        return self._working


__all__ = ["ApplyListener", "FilterEditor"]
