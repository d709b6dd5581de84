"""Shared fixtures for tally tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from fakes import RecordingDisplay, RecordingStorage
from tally.logging_setup import _ConsoleNoiseFilter


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if isinstance(h, logging.FileHandler) or any(
            isinstance(f, _ConsoleNoiseFilter) for f in h.filters
        ):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_tally_dir(temp_project: Path) -> Path:
    """Create a temporary .tally directory."""
    tally_dir = temp_project / ".tally"
    tally_dir.mkdir()
    return tally_dir


@pytest.fixture
def sample_records() -> list[str]:
    """One well-formed record of each kind."""
    return [
        "T | 0 | buy milk",
        "D | 1 | return book | 2024-03-05",
        "E | 0 | project meeting | Mon 2pm | 4pm",
    ]


@pytest.fixture
def sample_data_file(temp_tally_dir: Path, sample_records: list[str]) -> Path:
    """Create .tally/tasks.txt holding the sample records."""
    path = temp_tally_dir / "tasks.txt"
    path.write_text("\n".join(sample_records) + "\n")
    return path


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def storage() -> RecordingStorage:
    return RecordingStorage()
