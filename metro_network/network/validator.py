"""Transit graph validator."""

import logging

from metro_network.network.models import TransitGraph, ValidationReport
from metro_network.query.transfers import transfer_stations

logger = logging.getLogger(__name__)


class NetworkValidator:
    """Validate a built network for consistency."""

    def __init__(self, graph: TransitGraph) -> None:
        """Initialize validator with a transit graph."""
        self.graph = graph
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def validate(self) -> ValidationReport:
        """Run all validation checks."""
        logger.info("Validating network")

        self._validate_symmetry()
        self._validate_line_order()
        self._validate_distances()
        self._validate_connectivity()

        valid = len(self.errors) == 0

        stats = {
            "stations": self.graph.station_count,
            "lines": self.graph.line_count,
            "connections": self.graph.connection_count // 2,
            "transfers": len(transfer_stations(self.graph)),
        }

        report = ValidationReport(
            valid=valid,
            errors=self.errors.copy(),
            warnings=self.warnings.copy(),
            stats=stats,
        )

        if not valid:
            logger.error(f"Validation failed with {len(self.errors)} errors")
        elif self.warnings:
            logger.warning(f"Validation passed with {len(self.warnings)} warnings")
        else:
            logger.info("Validation passed")

        return report

    def _name(self, station: int) -> str:
        return self.graph.station_names[station]

    def _validate_symmetry(self) -> None:
        """Every directed edge has a reverse twin with the same line and distance."""
        graph = self.graph
        for source, edges in enumerate(graph.adjacency):
            for conn in edges:
                reverse = [
                    back
                    for back in graph.adjacency[conn.target]
                    if back.target == source and back.line == conn.line
                ]
                if not any(back.distance == conn.distance for back in reverse):
                    self.errors.append(
                        f"Connection {self._name(source)} -> {self._name(conn.target)} "
                        f"on line {graph.line_names[conn.line]} has no reverse connection"
                    )

    def _validate_line_order(self) -> None:
        """Edges only join stations adjacent in their line's order; warn on gaps."""
        graph = self.graph
        for line_id, stations in enumerate(graph.line_stations):
            line = graph.line_names[line_id]
            if len(stations) < 2:
                self.warnings.append(f"Line {line} has fewer than two stations")
                continue

            position = {station: i for i, station in enumerate(stations)}
            last = len(stations) - 1
            is_loop = all(
                graph.edge_distance(a, b, line_id) is not None
                for a, b in zip(stations, stations[1:])
            )
            for station in stations:
                for conn in graph.adjacency[station]:
                    if conn.line != line_id:
                        continue
                    i, j = position[station], position.get(conn.target, -2)
                    if abs(i - j) > 1 and not (is_loop and {i, j} == {0, last}):
                        self.errors.append(
                            f"Line {line} connects non-adjacent stations "
                            f"{self._name(station)} and {self._name(conn.target)}"
                        )

            for prev, current in zip(stations, stations[1:]):
                if graph.edge_distance(prev, current, line_id) is None:
                    self.warnings.append(
                        f"Line {line} has no connection between consecutive stations "
                        f"{self._name(prev)} and {self._name(current)}"
                    )

    def _validate_distances(self) -> None:
        """Warn on zero-length connections and conflicting duplicates."""
        graph = self.graph
        for source, edges in enumerate(graph.adjacency):
            seen: dict[tuple[int, int], float] = {}
            for conn in edges:
                if conn.target < source:
                    continue  # reported from the other end
                if conn.distance == 0:
                    self.warnings.append(
                        f"Connection {self._name(source)} -- {self._name(conn.target)} "
                        f"on line {graph.line_names[conn.line]} has zero length"
                    )
                key = (conn.target, conn.line)
                if key in seen and seen[key] != conn.distance:
                    self.warnings.append(
                        f"Connection {self._name(source)} -- {self._name(conn.target)} "
                        f"on line {graph.line_names[conn.line]} listed with conflicting "
                        f"distances {seen[key]} and {conn.distance}"
                    )
                seen.setdefault(key, conn.distance)

    def _validate_connectivity(self) -> None:
        """Warn when the network splits into separate components."""
        graph = self.graph
        component = [-1] * graph.station_count
        count = 0
        for root in range(graph.station_count):
            if component[root] != -1:
                continue
            component[root] = count
            stack = [root]
            while stack:
                station = stack.pop()
                for conn in graph.adjacency[station]:
                    if component[conn.target] == -1:
                        component[conn.target] = count
                        stack.append(conn.target)
            count += 1

        if count > 1:
            self.warnings.append(f"Network is split into {count} disconnected components")
