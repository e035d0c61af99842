"""Shared fixtures for topteam tests."""

from pathlib import Path

import pytest


DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def sample_results_path():
    """Twelve results over four match days, blank lines between days."""
    return DATA_DIR / "sample_results.txt"


@pytest.fixture
def raw_results(sample_results_path):
    """The sample results with blank lines removed."""
    return [line for line in sample_results_path.read_text().splitlines() if line.strip()]


@pytest.fixture
def day_rankings():
    """Top three (name, points) after each match day of the sample results."""
    return {
        1: [("Capitola Seahorses", 3), ("Felton Lumberjacks", 3), ("San Jose Earthquakes", 1)],
        2: [("Capitola Seahorses", 4), ("Aptos FC", 3), ("Felton Lumberjacks", 3)],
        3: [("Aptos FC", 6), ("Felton Lumberjacks", 6), ("Monterey United", 6)],
        4: [("Aptos FC", 9), ("Felton Lumberjacks", 7), ("Monterey United", 6)],
    }
