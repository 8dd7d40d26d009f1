"""Shortest-distance routing with line-change reconstruction."""

import heapq
import itertools
import logging
import math

from metro_network.network.models import (
    ALREADY_AT_DESTINATION,
    NO_ROUTE,
    PathResult,
    RideSegment,
    RouteOutcome,
    TransitGraph,
)

logger = logging.getLogger(__name__)


def shortest_path(graph: TransitGraph, start: str, end: str) -> PathResult:
    """
    Find the shortest-distance route between two stations.

    Dijkstra over every directed connection. A station's distance is only
    replaced on strict improvement and equal heap keys pop in push order, so
    among equally short alternatives the connection relaxed first wins.

    Args:
        graph: Transit graph
        start: Departure station name
        end: Arrival station name

    Returns:
        PathResult; an unreachable end gives an empty path and infinite distance

    Raises:
        UnknownStationError: start or end is not in the network
    """
    source = graph.station_id(start)
    target = graph.station_id(end)

    if source == target:
        return PathResult(path=(start,), arrival_lines={}, total_distance=0.0)

    dist = [math.inf] * graph.station_count
    prev_station = [-1] * graph.station_count
    prev_line = [-1] * graph.station_count
    dist[source] = 0.0

    counter = itertools.count()
    heap: list[tuple[float, int, int]] = [(0.0, next(counter), source)]

    while heap:
        current_dist, _, station = heapq.heappop(heap)
        if current_dist > dist[station]:
            continue  # stale entry
        if station == target:
            break

        for conn in graph.adjacency[station]:
            new_dist = current_dist + conn.distance
            if new_dist < dist[conn.target]:
                dist[conn.target] = new_dist
                prev_station[conn.target] = station
                prev_line[conn.target] = conn.line
                heapq.heappush(heap, (new_dist, next(counter), conn.target))

    if math.isinf(dist[target]):
        logger.info(f"No route from {start} to {end}")
        return PathResult(path=(), arrival_lines={}, total_distance=math.inf)

    stations = [target]
    while stations[-1] != source:
        stations.append(prev_station[stations[-1]])
    stations.reverse()

    path = tuple(graph.station_names[s] for s in stations)
    arrival_lines = {
        graph.station_names[s]: graph.line_names[prev_line[s]] for s in stations[1:]
    }
    return PathResult(path=path, arrival_lines=arrival_lines, total_distance=dist[target])


def format_path(result: PathResult) -> list[RideSegment] | RouteOutcome:
    """Group a route into one segment per line ridden.

    Consecutive segments share a station: the point where the rider changes lines.
    """
    if not result.found:
        return NO_ROUTE
    if len(result.path) == 1:
        return ALREADY_AT_DESTINATION

    path = result.path
    segments: list[RideSegment] = []
    current_line = result.arrival_lines[path[1]]
    boarded_at = path[0]

    for previous, station in zip(path[1:], path[2:]):
        line = result.arrival_lines[station]
        if line != current_line:
            segments.append(RideSegment(current_line, boarded_at, previous))
            boarded_at = previous
            current_line = line

    segments.append(RideSegment(current_line, boarded_at, path[-1]))
    return segments


def transfer_points(segments: list[RideSegment] | RouteOutcome) -> list[str]:
    """Stations where the route changes lines."""
    if isinstance(segments, RouteOutcome):
        return []
    return [segment.from_station for segment in segments[1:]]
