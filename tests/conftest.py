"""
Shared pytest setup for the dewdrop tests: markers, plugins and fixtures.
"""

import os
import shutil
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

pytest_plugins = [
    "tests.fixtures.logging",
    "tests.fixtures.cli",
]

MARKERS = {
    "unit": "fast tests without filesystem or process side effects",
    "integration": "tests touching the filesystem, cwd or real subprocesses",
}


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Treat everything not marked integration as a unit test."""
    for item in items:
        if item.get_closest_marker("integration") is None:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Scratch directory removed after the test."""
    path = Path(tempfile.mkdtemp(prefix="dewdrop-test-"))
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture(autouse=True)
def clean_dewdrop_env(monkeypatch) -> None:
    """Keep DEWDROP_* variables from the developer's shell out of tests."""
    for key in [k for k in os.environ if k.startswith("DEWDROP_")]:
        monkeypatch.delenv(key)
