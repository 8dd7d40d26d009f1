"""Transit graph construction from the line-table record feed."""

import logging
import math
from collections.abc import Iterable

from metro_network.errors import ParseError, StructuralError
from metro_network.network.models import Connection, EdgeRow, LineBegin, TransitGraph

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Accumulate line blocks and station pairs into one immutable TransitGraph."""

    def __init__(self) -> None:
        self.station_index: dict[str, int] = {}
        self.line_index: dict[str, int] = {}
        self.station_names: list[str] = []
        self.line_names: list[str] = []
        self.station_lines: list[set[int]] = []
        self.adjacency: list[list[Connection]] = []
        self.line_orders: dict[int, list[int]] = {}

        self._active_line: int | None = None
        self._current_stations: list[int] = []
        self._built = False

    def feed(self, records: Iterable[LineBegin | EdgeRow]) -> "GraphBuilder":
        """Consume records in order."""
        for record in records:
            if isinstance(record, LineBegin):
                self.begin_line(record.line)
            else:
                self.add_row(record)
        return self

    def begin_line(self, name: str) -> None:
        """Flush the active line and start accumulating a new one."""
        self._flush_line()
        line_id = self.line_index.get(name)
        if line_id is None:
            line_id = len(self.line_names)
            self.line_index[name] = line_id
            self.line_names.append(name)
        self._active_line = line_id
        self._current_stations = list(self.line_orders.get(line_id, []))

    def add_row(self, row: EdgeRow) -> None:
        """Register a station pair on the active line."""
        if not row.station_a or not row.station_b or row.distance in (None, ""):
            logger.debug(f"Skipping malformed row: {row}")
            return

        if self._active_line is None:
            raise StructuralError(
                f"Station pair {row.station_a}---{row.station_b} appears before any line header"
            )

        distance = self._parse_distance(row)
        line = self._active_line
        a = self._intern_station(row.station_a)
        b = self._intern_station(row.station_b)

        self.station_lines[a].add(line)
        self.station_lines[b].add(line)

        self.adjacency[a].append(Connection(target=b, line=line, distance=distance))
        self.adjacency[b].append(Connection(target=a, line=line, distance=distance))

        if a not in self._current_stations:
            self._current_stations.append(a)
        if b not in self._current_stations:
            self._current_stations.append(b)

    def build(self) -> TransitGraph:
        """Flush the last line and freeze the graph."""
        if self._built:
            raise StructuralError("GraphBuilder.build() may only be called once")
        self._flush_line()
        self._built = True

        line_stations = tuple(
            tuple(self.line_orders.get(line_id, [])) for line_id in range(len(self.line_names))
        )
        self._check_line_adjacency(line_stations)

        graph = TransitGraph(
            station_names=tuple(self.station_names),
            line_names=tuple(self.line_names),
            station_lines=tuple(frozenset(lines) for lines in self.station_lines),
            adjacency=tuple(tuple(edges) for edges in self.adjacency),
            line_stations=line_stations,
            station_index=dict(self.station_index),
            line_index=dict(self.line_index),
        )
        logger.info(
            f"Built network with {graph.station_count} stations, {graph.line_count} lines, "
            f"{graph.connection_count // 2} connections"
        )
        return graph

    def _flush_line(self) -> None:
        if self._active_line is not None:
            self.line_orders[self._active_line] = self._current_stations
        self._current_stations = []

    def _intern_station(self, name: str) -> int:
        station_id = self.station_index.get(name)
        if station_id is None:
            station_id = len(self.station_names)
            self.station_index[name] = station_id
            self.station_names.append(name)
            self.station_lines.append(set())
            self.adjacency.append([])
        return station_id

    def _parse_distance(self, row: EdgeRow) -> float:
        try:
            distance = float(row.distance)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            raise ParseError(
                f"Invalid distance {row.distance!r} between {row.station_a} and {row.station_b}"
            ) from None
        if not math.isfinite(distance) or distance < 0:
            raise ParseError(
                f"Distance between {row.station_a} and {row.station_b} must be a "
                f"non-negative number, got {row.distance!r}"
            )
        return distance

    def _check_line_adjacency(self, line_stations: tuple[tuple[int, ...], ...]) -> None:
        """Every edge on a line must join neighbours in that line's station order."""
        for line_id, stations in enumerate(line_stations):
            position = {station: i for i, station in enumerate(stations)}
            last = len(stations) - 1
            # A first-last edge only closes a loop when the whole line is connected
            is_loop = all(
                any(c.target == b and c.line == line_id for c in self.adjacency[a])
                for a, b in zip(stations, stations[1:])
            )
            for station in stations:
                for conn in self.adjacency[station]:
                    if conn.line != line_id:
                        continue
                    i, j = position[station], position[conn.target]
                    if abs(i - j) <= 1 or (is_loop and {i, j} == {0, last}):
                        continue
                    raise StructuralError(
                        f"Line {self.line_names[line_id]} connects "
                        f"{self.station_names[station]} and {self.station_names[conn.target]} "
                        f"which are not adjacent in its station order"
                    )


def build_graph(records: Iterable[LineBegin | EdgeRow]) -> TransitGraph:
    """Build a TransitGraph from a complete record feed."""
    logger.info("Building transit graph")
    return GraphBuilder().feed(records).build()
