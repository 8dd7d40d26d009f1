"""Radius-bounded search along a station's own lines."""

import logging
import math

from metro_network.errors import InvalidDistanceError
from metro_network.network.models import NearbyStation, TransitGraph

logger = logging.getLogger(__name__)


def nearby_stations(graph: TransitGraph, station: str, max_distance: float) -> list[NearbyStation]:
    """
    Find stations within max_distance of a station, travelling along one line at a time.

    Each line serving the station is walked towards both ends independently,
    so a station reachable several ways is listed once per way.

    Args:
        graph: Transit graph
        station: Station name; unknown names yield an empty list
        max_distance: Radius in km, inclusive

    Returns:
        Stations in line order, left walk before right walk for each line
    """
    if math.isnan(max_distance) or max_distance < 0:
        raise InvalidDistanceError(f"Search radius must be non-negative, got {max_distance}")

    if not graph.has_station(station):
        logger.debug(f"Station {station!r} not in network, nothing nearby")
        return []

    origin = graph.station_index[station]
    result: list[NearbyStation] = []

    for line in sorted(graph.station_lines[origin]):
        stations = graph.line_stations[line]
        index = stations.index(origin)
        result.extend(_walk(graph, line, stations, index, -1, max_distance))
        result.extend(_walk(graph, line, stations, index, 1, max_distance))

    return result


def _walk(
    graph: TransitGraph,
    line: int,
    stations: tuple[int, ...],
    index: int,
    step: int,
    max_distance: float,
) -> list[NearbyStation]:
    """Walk one direction of a line until the accumulated distance exceeds the radius."""
    found = []
    accumulated = 0.0
    i = index + step
    while 0 <= i < len(stations):
        distance = graph.edge_distance(stations[i - step], stations[i], line)
        if distance is None:
            break  # gap in the line table
        accumulated += distance
        if accumulated > max_distance:
            break
        found.append(
            NearbyStation(graph.station_names[stations[i]], graph.line_names[line], accumulated)
        )
        i += step
    return found
