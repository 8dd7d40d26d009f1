"""Exception types raised while loading and querying a metro network."""


class MetroNetworkError(Exception):
    """Base class for all metro network errors."""


class ParseError(MetroNetworkError, ValueError):
    """A line table carries a distance that is not a valid number."""


class StructuralError(MetroNetworkError):
    """The record feed does not describe a well-formed network."""


class UnknownStationError(MetroNetworkError, LookupError):
    """A query names a station that is not part of the network."""

    def __init__(self, station: str) -> None:
        super().__init__(f"Unknown station: {station!r}")
        self.station = station


class InvalidDistanceError(MetroNetworkError, ValueError):
    """A distance argument is negative or not finite."""
