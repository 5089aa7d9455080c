# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, configuration)."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from rich.console import Console
from rich.text import Text

from ..config import ConfigError, DashqConfig, load_config
from ..errors import DashqError

PACKAGE_LOGGER_NAME: Final[str] = "dashq"
_VERBOSE_MARKER: Final[str] = "_dashq_verbose_configured"
_OK_MARK: Final[str] = "✅"
_WARN_MARK: Final[str] = "⚠️"
_FAIL_MARK: Final[str] = "❌"
_INFO_MARK: Final[str] = "ℹ️"


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Render status lines and tables for one CLI invocation."""

    console: Console
    use_emoji: bool

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences.

        Args:
            message: Text describing the failure state.
        """

        self._status(_FAIL_MARK, message, "red")

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences.

        Args:
            message: Text describing the warning condition.
        """

        self._status(_WARN_MARK, message, "yellow")

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences.

        Args:
            message: Text describing the successful state.
        """

        self._status(_OK_MARK, message, "green")

    def info(self, message: str) -> None:
        """Log an informational message honouring emoji preferences.

        Args:
            message: Text describing the outcome, such as an empty result.
        """

        self._status(_INFO_MARK, message, "cyan")

    def _status(self, mark: str, message: str, style: str) -> None:
        prefix = f"{mark} " if self.use_emoji else ""
        self.console.print(Text(f"{prefix}{message}", style=style))


def build_cli_logger(config: DashqConfig) -> CLILogger:
    """Return a ``CLILogger`` honouring the output section of ``config``.

    Args:
        config: Active configuration.

    Returns:
        CLILogger: Logger bound to a dedicated Rich console.
    """

    output = config.output
    console = Console(no_color=not output.color, highlight=False, emoji=output.emoji, soft_wrap=True)
    return CLILogger(console=console, use_emoji=output.emoji)


def ensure_verbose_logger() -> None:
    """Stream debug records of the ``dashq`` logger to stderr."""

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if getattr(logger, _VERBOSE_MARKER, False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    setattr(logger, _VERBOSE_MARKER, True)


def load_cli_config(root: Path, config_path: Path | None) -> DashqConfig:
    """Load configuration for a CLI invocation.

    Raises:
        CLIError: If the configuration is invalid.
    """

    try:
        return load_config(root, config_path=config_path)
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=2) from exc


def report_error(logger: CLILogger, exc: DashqError | CLIError) -> int:
    """Render ``exc`` through ``logger`` and return the exit status to use."""

    logger.fail(str(exc))
    return exc.exit_code if isinstance(exc, CLIError) else 1


def fallback_logger() -> CLILogger:
    """Return a logger using default output settings, for errors raised before config loads."""

    return build_cli_logger(DashqConfig())


__all__ = [
    "CLIError",
    "CLILogger",
    "build_cli_logger",
    "ensure_verbose_logger",
    "fallback_logger",
    "load_cli_config",
    "report_error",
]
