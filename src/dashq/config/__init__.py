# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration models and layered loading."""

from __future__ import annotations

from .loader import ConfigLoader, load_config
from .models import ConfigError, DashqConfig, FilterConfig, OutputConfig, SearchConfig

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "DashqConfig",
    "FilterConfig",
    "OutputConfig",
    "SearchConfig",
    "load_config",
]
