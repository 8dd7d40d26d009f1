"""Interchange detection."""

from metro_network.network.models import TransitGraph


def transfer_stations(graph: TransitGraph) -> dict[str, frozenset[str]]:
    """Map every station served by two or more lines to the names of those lines."""
    return {
        graph.station_names[station]: frozenset(graph.line_names[line] for line in lines)
        for station, lines in enumerate(graph.station_lines)
        if len(lines) >= 2
    }
