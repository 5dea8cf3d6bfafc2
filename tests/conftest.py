"""Shared pytest configuration for all test levels."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, settings

from sitemap_store.config import DocumentConfig
from tests.test_utils.helpers import FixedClock, copy_fixture

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def base_config() -> DocumentConfig:
    return DocumentConfig(base_url="https://example.com")


@pytest.fixture
def sitemap_path(tmp_path: Path) -> Path:
    return tmp_path / "sitemap.xml"


@pytest.fixture
def index_path(tmp_path: Path) -> Path:
    return tmp_path / "index.xml"


@pytest.fixture
def fixture_copy(tmp_path: Path) -> Callable[[str, str], Path]:
    def build(name: str, target: str) -> Path:
        return copy_fixture(name, tmp_path / target)

    return build


# Configure Hypothesis global settings
settings.register_profile(
    "dev",
    max_examples=50,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.register_profile(
    "ci",
    max_examples=100,
    deadline=5000,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

if os.getenv("CI"):
    settings.load_profile("ci")
else:
    settings.load_profile("dev")


_LEVEL_MARKERS = {
    "unit": pytest.mark.unit,
    "integration": pytest.mark.integration,
}


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        rel = item.path.relative_to(Path(__file__).resolve().parent) if item.path else None
        if rel is None:
            continue
        for level, marker in _LEVEL_MARKERS.items():
            if rel.parts[0] == level:
                item.add_marker(marker)
                break
