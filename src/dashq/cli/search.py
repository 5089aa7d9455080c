# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog search and tag discovery commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..catalog import CatalogBrowser, CatalogDocument, GroupBy, load_catalog_document, load_metadata
from ..config import DashqConfig
from ..errors import DashqError
from .rendering import (
    NO_ITEMS_MESSAGE,
    NO_RESULTS_MESSAGE,
    NOT_LOADED_MESSAGE,
    build_tag_keys_table,
    render_view,
)
from .shared import (
    CLIError,
    build_cli_logger,
    ensure_verbose_logger,
    fallback_logger,
    load_cli_config,
    report_error,
)


def _load_inputs(catalog: Path, metadata: Path | None) -> CatalogDocument:
    """Read the catalog document, replacing its metadata when ``metadata`` is given."""

    document = load_catalog_document(catalog)
    if metadata is None:
        return document
    return CatalogDocument(items=document.items, metadata=load_metadata(metadata), source=document.source)


def _resolve_group_by(raw: str | None, config: DashqConfig) -> GroupBy:
    if raw is None:
        return config.search.grouping()
    try:
        return GroupBy.parse(raw)
    except ValueError as exc:
        raise CLIError(str(exc), exit_code=2) from exc


def run_search(
    catalog: Path,
    query: str,
    *,
    metadata: Path | None = None,
    group_by: str | None = None,
    root: Path | None = None,
    config_path: Path | None = None,
) -> int:
    """Search the catalog at ``catalog`` and render the grouped results.

    Args:
        catalog: Catalog document path.
        query: Free-text search value; blank lists the top-level items.
        metadata: Optional metadata document overriding the embedded one.
        group_by: Optional ``tag:<key>`` or ``mod`` grouping override.
        root: Project root used to discover configuration.
        config_path: Optional explicit configuration file.

    Returns:
        int: ``0`` when rendering succeeds, non-zero on failure.
    """

    logger = fallback_logger()
    try:
        config = load_cli_config(root or Path.cwd(), config_path)
        logger = build_cli_logger(config)
        mode = _resolve_group_by(group_by, config)
        document = _load_inputs(catalog, metadata)
    except (CLIError, DashqError) as exc:
        return report_error(logger, exc)

    browser = CatalogBrowser(group_by=mode)
    browser.load(document.items, document.metadata)
    view = browser.set_search(query)
    if not view.loaded:
        logger.warn(NOT_LOADED_MESSAGE)
        return 1
    if view.is_empty:
        logger.info(NO_RESULTS_MESSAGE if view.search_active else NO_ITEMS_MESSAGE)
        return 0
    render_view(logger.console, view, config.search.quick_filter_tags)
    return 0


def run_tags(catalog: Path, *, metadata: Path | None = None) -> int:
    """List the tag keys discovered while indexing ``catalog``."""

    logger = fallback_logger()
    try:
        document = _load_inputs(catalog, metadata)
    except DashqError as exc:
        return report_error(logger, exc)

    discovered: list[str] = []
    browser = CatalogBrowser(group_by=GroupBy.by_mod(), on_tag_keys=discovered.extend)
    view = browser.load(document.items, document.metadata)
    if not view.loaded:
        logger.warn(NOT_LOADED_MESSAGE)
        return 1
    if not discovered:
        logger.info("No tags found.")
        return 0
    logger.console.print(build_tag_keys_table(discovered))
    return 0


def search_command(
    catalog: Annotated[Path, typer.Argument(..., help="Catalog JSON document.")],
    query: Annotated[str, typer.Argument(help="Free-text search terms.")] = "",
    metadata: Annotated[
        Path | None,
        typer.Option("--metadata", "-m", help="Metadata JSON document overriding the embedded metadata."),
    ] = None,
    group_by: Annotated[
        str | None,
        typer.Option("--group-by", "-g", help="Grouping mode: 'tag:<key>' or 'mod'."),
    ] = None,
    root: Annotated[Path | None, typer.Option("--root", "-r", help="Project root.")] = None,
    config: Annotated[Path | None, typer.Option("--config", "-c", help="Configuration file.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr.")] = False,
) -> None:
    """Search the dashboard catalog and show grouped results."""

    if verbose:
        ensure_verbose_logger()
    exit_code = run_search(
        catalog,
        query,
        metadata=metadata,
        group_by=group_by,
        root=root,
        config_path=config,
    )
    raise typer.Exit(code=exit_code)


def tags_command(
    catalog: Annotated[Path, typer.Argument(..., help="Catalog JSON document.")],
    metadata: Annotated[
        Path | None,
        typer.Option("--metadata", "-m", help="Metadata JSON document overriding the embedded metadata."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr.")] = False,
) -> None:
    """List the tag keys found in the catalog."""

    if verbose:
        ensure_verbose_logger()
    raise typer.Exit(code=run_tags(catalog, metadata=metadata))


__all__ = ["run_search", "run_tags", "search_command", "tags_command"]
