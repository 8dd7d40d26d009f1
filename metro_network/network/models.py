"""Data models for line tables and the in-memory transit graph."""

import math
from dataclasses import dataclass, field

from metro_network.errors import UnknownStationError


@dataclass(frozen=True)
class LineBegin:
    """Start of a line's station-distance table."""

    line: str


@dataclass(frozen=True)
class EdgeRow:
    """Two adjacent stations and the distance between them, scoped to the active line."""

    station_a: str
    station_b: str
    distance: str | float | None  # raw cell text until the builder parses it


@dataclass(frozen=True)
class Connection:
    """Directed edge between two interned stations."""

    target: int
    line: int
    distance: float  # km


@dataclass(frozen=True)
class TransitGraph:
    """Immutable network with interned station and line identifiers."""

    station_names: tuple[str, ...]
    line_names: tuple[str, ...]
    station_lines: tuple[frozenset[int], ...]
    adjacency: tuple[tuple[Connection, ...], ...]
    line_stations: tuple[tuple[int, ...], ...]
    station_index: dict[str, int] = field(default_factory=dict, compare=False, repr=False)
    line_index: dict[str, int] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.station_index:
            self.station_index.update({name: i for i, name in enumerate(self.station_names)})
        if not self.line_index:
            self.line_index.update({name: i for i, name in enumerate(self.line_names)})

    @property
    def station_count(self) -> int:
        return len(self.station_names)

    @property
    def line_count(self) -> int:
        return len(self.line_names)

    @property
    def connection_count(self) -> int:
        """Number of directed edges."""
        return sum(len(edges) for edges in self.adjacency)

    def has_station(self, name: str) -> bool:
        return name in self.station_index

    def station_id(self, name: str) -> int:
        """Resolve a station name, raising UnknownStationError if absent."""
        try:
            return self.station_index[name]
        except KeyError:
            raise UnknownStationError(name) from None

    def lines_of(self, station: str) -> frozenset[str]:
        """Names of the lines serving a station."""
        station_id = self.station_id(station)
        return frozenset(self.line_names[line] for line in self.station_lines[station_id])

    def stations_on(self, line: str) -> list[str]:
        """Station names of a line in track order."""
        line_id = self.line_index[line]
        return [self.station_names[s] for s in self.line_stations[line_id]]

    def neighbors(self, station: str) -> list[tuple[str, str, float]]:
        """Outgoing (target, line, distance) triples of a station."""
        station_id = self.station_id(station)
        return [
            (self.station_names[c.target], self.line_names[c.line], c.distance)
            for c in self.adjacency[station_id]
        ]

    def edge_distance(self, source: int, target: int, line: int) -> float | None:
        """Distance of the first edge source -> target on a line, None if not connected."""
        for conn in self.adjacency[source]:
            if conn.target == target and conn.line == line:
                return conn.distance
        return None


@dataclass(frozen=True)
class NearbyStation:
    """Station reachable along one line within a distance radius."""

    station: str
    line: str
    distance: float


@dataclass
class PathResult:
    """Shortest route between two stations."""

    path: tuple[str, ...]
    arrival_lines: dict[str, str]  # station -> line used to arrive there
    total_distance: float

    @property
    def found(self) -> bool:
        return bool(self.path) and math.isfinite(self.total_distance)


@dataclass(frozen=True)
class RideSegment:
    """Uninterrupted ride on one line."""

    line: str
    from_station: str
    to_station: str


@dataclass(frozen=True)
class RouteOutcome:
    """Route result that carries no ride segments."""

    reason: str


NO_ROUTE = RouteOutcome("no route")
ALREADY_AT_DESTINATION = RouteOutcome("already at destination")


@dataclass
class TripPlan:
    """Route, its ride segments and its price."""

    start: str
    end: str
    result: PathResult
    segments: list[RideSegment] | RouteOutcome
    transfers: list[str] = field(default_factory=list)
    fare: float | None = None
    card_fare: float | None = None


@dataclass
class ValidationReport:
    """Report from validation process."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    stats: dict[str, int] = field(default_factory=dict)


@dataclass
class LoadConfig:
    """Configuration for reading a line-table file."""

    input_path: str
    encoding: str = "utf-8"
    line_marker: str = "站点间距"
    station_separator: str = "---"
    header_lines: int = 2  # raw lines discarded after each line marker
