"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from taskpad.store import TaskStore  # noqa: E402


@pytest.fixture
def data_file(tmp_path):
    """Path to a task file inside a temporary directory."""
    return tmp_path / "tasks.txt"


@pytest.fixture
def store():
    """Store holding the two scenario tasks."""
    store = TaskStore()
    store.add("buy milk")
    store.add("walk dog")
    return store
