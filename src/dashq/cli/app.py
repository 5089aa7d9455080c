# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .filters import fields_command, validate_command
from .search import search_command, tags_command

app = typer.Typer(help="Dashboard catalog search and filter tooling.", no_args_is_help=True)
app.command("search")(search_command)
app.command("tags")(tags_command)

filter_app = typer.Typer(help="Inspect and validate filter expressions.", no_args_is_help=True)
filter_app.command("validate")(validate_command)
filter_app.command("fields")(fields_command)
app.add_typer(filter_app, name="filter")

__all__ = ["app"]
