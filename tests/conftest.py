"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from metro_network.network.builder import build_graph
from metro_network.network.models import EdgeRow, LineBegin, TransitGraph


@pytest.fixture
def wuhan_sample() -> Path:
    """Path to a four-line sample in the line-table format."""
    return Path(__file__).parent / "fixtures" / "wuhan_sample.txt"


@pytest.fixture
def bad_distance() -> Path:
    """Path to a line table with a non-numeric distance."""
    return Path(__file__).parent / "fixtures" / "bad_distance.txt"


@pytest.fixture
def disconnected_file() -> Path:
    """Path to a line table with two lines that share no station."""
    return Path(__file__).parent / "fixtures" / "disconnected.txt"


@pytest.fixture
def interchange_graph() -> TransitGraph:
    """Line A = P-X-Q, line B = X-Y-Z, sharing interchange X."""
    return build_graph(
        [
            LineBegin("A"),
            EdgeRow("P", "X", "3"),
            EdgeRow("X", "Q", "2"),
            LineBegin("B"),
            EdgeRow("X", "Y", "1"),
            EdgeRow("Y", "Z", "4"),
        ]
    )


@pytest.fixture
def disconnected_graph() -> TransitGraph:
    """Two lines with no station in common."""
    return build_graph(
        [
            LineBegin("North"),
            EdgeRow("N1", "N2", "1.5"),
            EdgeRow("N2", "N3", "2.5"),
            LineBegin("South"),
            EdgeRow("S1", "S2", "1.0"),
        ]
    )
