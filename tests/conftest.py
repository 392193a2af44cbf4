"""
Pytest configuration and fixtures for the phone book benchmark tests.

This file contains shared fixtures and configuration for all test modules.
"""

import shutil
import sys
import tempfile
from pathlib import Path

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


class FakeClock:
    """Clock that advances by a fixed step (in seconds) on every call."""

    def __init__(self, step: float = 0.0, start: float = 100.0):
        self.step = step
        self.now = start
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        self.now += self.step
        return self.now


@pytest.fixture
def temp_dir():
    """Create a temporary directory for a single test."""
    temp_dir = tempfile.mkdtemp(prefix="phonebook_test_")
    yield Path(temp_dir)

    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def frozen_clock():
    """A clock that never advances, so no sort can run over budget."""
    return FakeClock(step=0.0)


@pytest.fixture
def ticking_clock():
    """A clock that advances one millisecond per reading."""
    return FakeClock(step=0.001)


@pytest.fixture
def sample_lines():
    """Provide a consistent, unsorted set of directory lines."""
    return [
        "5551234 Zoe Adams",
        "5550001 Alice Brown",
        "5559876 Charlie Davis",
        "5554321 Bob Evans",
        "5552222 Diana Frost",
        "5557777 Eve Green",
        "5553333 Frank Hill",
    ]


@pytest.fixture
def sample_directory(sample_lines):
    from src.data_structures.directory import Directory

    return Directory.from_lines(sample_lines)


@pytest.fixture
def sorted_directory(sample_lines):
    from src.data_structures.directory import Directory
    from src.data_structures.entry import parse_entry

    entries = [parse_entry(line) for line in sample_lines]
    return Directory(sorted(entries, key=lambda entry: entry.key))


@pytest.fixture
def phonebook_files(temp_dir, sample_lines):
    """Write sample directory and query files and return their paths."""
    directory_path = temp_dir / "directory.txt"
    find_path = temp_dir / "find.txt"
    directory_path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    find_path.write_text("Bob Evans\nEve Green\nNobody Here\n", encoding="utf-8")
    return directory_path, find_path


# Configure pytest markers
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


# Custom collection modifiers
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        if any(keyword in item.nodeid for keyword in ["large", "stress"]):
            item.add_marker(pytest.mark.slow)

        if not any(
            marker.name in ["integration", "slow"] for marker in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow", action="store_true", default=False, help="run slow tests"
    )


def pytest_runtest_setup(item):
    """Skip slow tests unless --run-slow is passed."""
    if "slow" in item.keywords and not item.config.getoption("--run-slow"):
        pytest.skip("need --run-slow option to run")
