"""Tests for the network validator."""

from pathlib import Path

from metro_network.api import load_network
from metro_network.network.builder import build_graph
from metro_network.network.models import Connection, EdgeRow, LineBegin, TransitGraph
from metro_network.network.validator import NetworkValidator


def test_validator_valid_data(wuhan_sample: Path) -> None:
    """Test validator passes on the sample network."""
    report = NetworkValidator(load_network(str(wuhan_sample))).validate()

    assert report.valid
    assert len(report.errors) == 0
    assert report.warnings == []
    assert report.stats == {"stations": 14, "lines": 4, "connections": 13, "transfers": 3}


def test_validator_asymmetric_edge() -> None:
    """Test validator catches a connection without its reverse."""
    graph = TransitGraph(
        station_names=("A", "B"),
        line_names=("L",),
        station_lines=(frozenset({0}), frozenset({0})),
        adjacency=((Connection(1, 0, 1.0),), ()),
        line_stations=((0, 1),),
    )
    report = NetworkValidator(graph).validate()

    assert not report.valid
    assert any("no reverse connection" in err for err in report.errors)


def test_validator_non_adjacent_edge() -> None:
    """Test validator catches an edge between stations far apart on their line."""
    graph = TransitGraph(
        station_names=("A", "B", "C", "D"),
        line_names=("L",),
        station_lines=(frozenset({0}),) * 4,
        adjacency=(
            (Connection(1, 0, 1.0), Connection(2, 0, 2.0)),
            (Connection(0, 0, 1.0), Connection(2, 0, 1.0)),
            (Connection(1, 0, 1.0), Connection(3, 0, 1.0), Connection(0, 0, 2.0)),
            (Connection(2, 0, 1.0),),
        ),
        line_stations=((0, 1, 2, 3),),
    )
    report = NetworkValidator(graph).validate()

    assert not report.valid
    assert any("non-adjacent" in err for err in report.errors)


def test_validator_warnings() -> None:
    """Test gaps, zero lengths, conflicting duplicates and split networks are warnings."""
    graph = build_graph(
        [
            LineBegin("L"),
            EdgeRow("A", "B", "1"),
            EdgeRow("A", "B", "2"),
            EdgeRow("C", "D", "0"),
        ]
    )
    report = NetworkValidator(graph).validate()

    assert report.valid
    assert any("no connection between consecutive stations B and C" in w for w in report.warnings)
    assert any("zero length" in w for w in report.warnings)
    assert any("conflicting distances" in w for w in report.warnings)
    assert any("2 disconnected components" in w for w in report.warnings)


def test_validator_short_line() -> None:
    """Test a line header without station pairs is reported."""
    graph = build_graph([LineBegin("Empty"), LineBegin("L"), EdgeRow("A", "B", "1")])
    report = NetworkValidator(graph).validate()

    assert any("Empty has fewer than two stations" in w for w in report.warnings)


def test_validator_first_last_edge_without_loop() -> None:
    """Test a first-last edge only counts as loop closure when the line is connected."""
    # Order C, D, A, B: C-D and A-B exist, D-A does not, B-C joins last to first
    graph = TransitGraph(
        station_names=("C", "D", "A", "B"),
        line_names=("L",),
        station_lines=(frozenset({0}),) * 4,
        adjacency=(
            (Connection(1, 0, 1.0), Connection(3, 0, 1.0)),
            (Connection(0, 0, 1.0),),
            (Connection(3, 0, 1.0),),
            (Connection(2, 0, 1.0), Connection(0, 0, 1.0)),
        ),
        line_stations=((0, 1, 2, 3),),
    )
    report = NetworkValidator(graph).validate()

    assert not report.valid
    assert any("non-adjacent stations B and C" in err for err in report.errors)
