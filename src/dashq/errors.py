# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised at the I/O boundaries of dashq."""

from __future__ import annotations


class DashqError(RuntimeError):
    """Base class for errors raised while loading dashq inputs."""


class CatalogDocumentError(DashqError):
    """Raised when a catalog, metadata or value-context document is unusable."""


class FilterParseError(DashqError):
    """Raised when a filter payload cannot be turned into a filter expression."""


__all__ = ("CatalogDocumentError", "DashqError", "FilterParseError")
