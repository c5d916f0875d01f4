# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for heritage tracker tests."""

import json
import os

import pytest

# Keep test output free of the console log sink
os.environ.setdefault("DISABLE_LOGGING", "1")


@pytest.fixture
def make_site():
    """Build a Site from camelCase record fields with sensible defaults."""
    from heritage.models import Site

    def _make(**fields):
        record = {
            "id": "test-site",
            "name": "Test Site",
            "type": "historic-building",
            "status": "damaged",
            "yearBuilt": "unknown",
        }
        record.update(fields)
        return Site.model_validate(record)

    return _make


@pytest.fixture
def sample_site_records() -> list:
    """Three records covering ancient, medieval and modern sites."""
    return [
        {
            "id": "ancient-site",
            "name": "Ancient Site",
            "type": "archaeological",
            "yearBuilt": "800 BCE - 1100 CE",
            "coordinates": [31.5, 34.4],
            "status": "destroyed",
            "dateDestroyed": "2023-10-15",
            "description": "Ancient site",
        },
        {
            "id": "medieval-site",
            "name": "Medieval Site",
            "nameArabic": "موقع من العصور الوسطى",
            "type": "mosque",
            "yearBuilt": "7th century",
            "coordinates": [31.5, 34.4],
            "status": "heavily-damaged",
            "dateDestroyed": "2023-12-01",
            "description": "Medieval site",
        },
        {
            "id": "modern-site",
            "name": "Modern Site",
            "type": "museum",
            "yearBuilt": "1950",
            "coordinates": [31.5, 34.4],
            "status": "damaged",
            "dateDestroyed": "2024-01-15",
            "description": "Modern site",
        },
    ]


@pytest.fixture
def sample_sites(sample_site_records: list) -> list:
    """The sample records validated into Site models."""
    from heritage.models import Site

    return [Site.model_validate(record) for record in sample_site_records]


@pytest.fixture
def sites_file(tmp_path, sample_site_records: list):
    """Sample records written to a JSON file in the static export shape."""
    path = tmp_path / "sites.json"
    path.write_text(json.dumps({"sites": sample_site_records}), encoding="utf-8")
    return path
