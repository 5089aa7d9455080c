# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from dashq.catalog import CatalogItem, CatalogMetadata


@pytest.fixture
def metadata_payload() -> dict[str, Any]:
    return {
        "mod": {"full_name": "mod.local", "title": "Local Mod"},
        "installed_mods": {
            "mod.aws": {"full_name": "mod.aws", "title": "AWS Compliance"},
            "mod.k8s": {"full_name": "mod.k8s", "short_name": "kubernetes"},
        },
    }


@pytest.fixture
def catalog_payload() -> list[dict[str, Any]]:
    return [
        {
            "full_name": "local.dashboard.overview",
            "type": "dashboard",
            "title": "Overview",
            "is_top_level": True,
            "mod_full_name": "mod.local",
            "tags": {"service": "aws", "type": "Report"},
        },
        {
            "full_name": "aws.benchmark.cis",
            "type": "benchmark",
            "title": "CIS v1.4",
            "is_top_level": True,
            "mod_full_name": "mod.aws",
            "tags": {"service": "aws", "category": "Compliance"},
            "trunks": [["aws.benchmark.cis"]],
        },
        {
            "full_name": "aws.benchmark.cis_section_1",
            "type": "benchmark",
            "title": "Section 1 IAM",
            "is_top_level": False,
            "mod_full_name": "mod.aws",
            "tags": {"service": "aws"},
            "trunks": [["aws.benchmark.cis", "aws.benchmark.cis_section_1"]],
        },
        {
            "full_name": "k8s.dashboard.pods",
            "type": "dashboard",
            "short_name": "pods",
            "is_top_level": True,
            "mod_full_name": "mod.k8s",
            "tags": {"service": "kubernetes"},
        },
        {
            "full_name": "other.dashboard.unowned",
            "type": "dashboard",
            "title": "Unowned",
            "is_top_level": True,
            "mod_full_name": "mod.missing",
        },
    ]


@pytest.fixture
def catalog_items(catalog_payload: list[dict[str, Any]]) -> list[CatalogItem]:
    return [CatalogItem.model_validate(entry) for entry in catalog_payload]


@pytest.fixture
def catalog_metadata(metadata_payload: dict[str, Any]) -> CatalogMetadata:
    return CatalogMetadata.model_validate(metadata_payload)


@pytest.fixture
def value_context() -> dict[str, Any]:
    return {
        "status": {"ok": 3, "alarm": 0, "error": 2},
        "control_tag": {"key": {"service": {"aws": 4, "gcp": 1}, "category": {"cost": 2}}},
        "dimension": {"key": {"region": {"us-east-1": 5}}},
        "benchmark": {"value": {"aws.benchmark.cis": {"title": "CIS v1.4", "count": 3}}},
        "control": {"value": {"aws.control.mfa": {"title": "MFA", "count": 1}}},
        "resource": {"value": {"arn:aws:s3:::bucket": 2}},
        "severity": {"value": {"high": 1, "low": 4}},
    }


@pytest.fixture
def catalog_file(
    tmp_path: Path,
    catalog_payload: list[dict[str, Any]],
    metadata_payload: dict[str, Any],
) -> Path:
    """Write a catalog document with embedded metadata and return its path."""

    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"dashboards": catalog_payload, "metadata": metadata_payload}), encoding="utf-8")
    return path
