"""Pytest configuration for the project."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

for candidate in (ROOT, SRC):
    if str(candidate) not in sys.path:
        sys.path.insert(0, str(candidate))

from src.infrastructure.geo.resolver import GeoResolver  # noqa: E402


@pytest.fixture()
def resolver() -> GeoResolver:
    return GeoResolver.default()
