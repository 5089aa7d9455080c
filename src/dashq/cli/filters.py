# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filter validation and field discovery commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..errors import DashqError
from ..filters import FieldCatalog, check_filter, load_filter_payload, load_value_context
from .rendering import build_field_types_table, build_keys_table, build_values_table
from .shared import CLIError, build_cli_logger, fallback_logger, load_cli_config, report_error


def run_validate(path: Path, *, root: Path | None = None, config_path: Path | None = None) -> int:
    """Check the filter stored at ``path`` and report the verdict.

    Returns:
        int: ``0`` for a valid filter, ``1`` for an invalid or unreadable one.
    """

    logger = fallback_logger()
    try:
        logger = build_cli_logger(load_cli_config(root or Path.cwd(), config_path))
        payload = load_filter_payload(path)
    except (CLIError, DashqError) as exc:
        return report_error(logger, exc)

    verdict = check_filter(payload)
    if verdict:
        logger.ok(f"{path}: filter is valid")
        return 0
    logger.fail(f"{path}: filter is invalid ({verdict.reason})")
    return 1


def run_fields(
    context_path: Path,
    *,
    field_type: str | None = None,
    key: str | None = None,
    root: Path | None = None,
    config_path: Path | None = None,
) -> int:
    """List field types, or the keys or values of one type, from a value context.

    Args:
        context_path: Value-statistics context document.
        field_type: Optional field type to inspect.
        key: Optional key scoping the values of a keyed field type.
        root: Project root used to discover configuration.
        config_path: Optional explicit configuration file.

    Returns:
        int: ``0`` when rendering succeeds, non-zero on failure.
    """

    logger = fallback_logger()
    try:
        config = load_cli_config(root or Path.cwd(), config_path)
        logger = build_cli_logger(config)
        context = load_value_context(context_path)
    except (CLIError, DashqError) as exc:
        return report_error(logger, exc)

    catalog = FieldCatalog.from_context(context, config.filters.field_settings())
    console = logger.console
    if field_type is None:
        options = catalog.options()
        if not options:
            logger.info("No field types found.")
            return 0
        console.print(build_field_types_table(options))
        return 0

    resolved = catalog.field_type(field_type)
    if resolved is None:
        logger.fail(f"unknown field type '{field_type}'")
        return 1
    if resolved.keyed and key is None:
        console.print(build_keys_table(resolved.label, resolved.keys))
        return 0
    values = catalog.values(field_type, key)
    if not values:
        logger.info(f"No values found for {resolved.label}.")
        return 0
    title = f"{resolved.label}: {key}" if key is not None else resolved.label
    console.print(build_values_table(title, values))
    return 0


def validate_command(
    path: Annotated[Path, typer.Argument(..., help="Filter JSON document.")],
    root: Annotated[Path | None, typer.Option("--root", "-r", help="Project root.")] = None,
    config: Annotated[Path | None, typer.Option("--config", "-c", help="Configuration file.")] = None,
) -> None:
    """Validate a filter expression document."""

    raise typer.Exit(code=run_validate(path, root=root, config_path=config))


def fields_command(
    context: Annotated[Path, typer.Argument(..., help="Value context JSON document.")],
    field_type: Annotated[str | None, typer.Option("--type", "-t", help="Field type to inspect.")] = None,
    key: Annotated[str | None, typer.Option("--key", "-k", help="Key of a keyed field type.")] = None,
    root: Annotated[Path | None, typer.Option("--root", "-r", help="Project root.")] = None,
    config: Annotated[Path | None, typer.Option("--config", "-c", help="Configuration file.")] = None,
) -> None:
    """List selectable filter fields and their observed values."""

    raise typer.Exit(
        code=run_fields(context, field_type=field_type, key=key, root=root, config_path=config),
    )


__all__ = ["fields_command", "run_fields", "run_validate", "validate_command"]
