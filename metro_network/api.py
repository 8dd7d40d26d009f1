"""Public API for metro-network."""

import logging

from metro_network.errors import ParseError, StructuralError
from metro_network.network.builder import build_graph
from metro_network.network.models import LoadConfig, TransitGraph, TripPlan, ValidationReport
from metro_network.network.reader import LineTableReader
from metro_network.network.validator import NetworkValidator
from metro_network.query.fares import CARD_DISCOUNT, card_fare, fare
from metro_network.query.routing import format_path, shortest_path, transfer_points

logger = logging.getLogger(__name__)


def load_network(input_path: str, config: LoadConfig | None = None) -> TransitGraph:
    """
    Read a line-table file and build the transit graph.

    Args:
        input_path: Path to the line-table text file
        config: Optional load configuration

    Returns:
        Immutable TransitGraph

    Raises:
        FileNotFoundError: input_path does not exist
        ParseError: a distance cell is not a valid number
        StructuralError: the tables do not describe a consistent network
    """
    if config is None:
        config = LoadConfig(input_path=input_path)

    reader = LineTableReader(config)
    records = reader.read_records()
    return build_graph(records)


def plan_trip(
    graph: TransitGraph,
    start: str,
    end: str,
    discount: float = CARD_DISCOUNT,
) -> TripPlan:
    """
    Route between two stations and price the trip.

    Raises:
        UnknownStationError: start or end is not in the network
    """
    logger.info(f"Planning trip: {start} -> {end}")
    result = shortest_path(graph, start, end)
    segments = format_path(result)

    plan = TripPlan(
        start=start,
        end=end,
        result=result,
        segments=segments,
        transfers=transfer_points(segments),
    )
    if result.found:
        plan.fare = fare(result.total_distance)
        plan.card_fare = card_fare(result.total_distance, discount)
        logger.info(
            f"Route of {len(result.path)} stations, {result.total_distance:.2f} km, "
            f"{len(plan.transfers)} transfers"
        )
    return plan


def validate(input_path: str, config: LoadConfig | None = None) -> ValidationReport:
    """
    Load a line-table file and check the resulting network.

    Args:
        input_path: Path to the line-table text file
        config: Optional load configuration

    Returns:
        ValidationReport with results
    """
    logger.info(f"Validating network: {input_path}")
    try:
        graph = load_network(input_path, config)
    except (FileNotFoundError, ParseError, StructuralError) as e:
        logger.error(f"Network failed to load: {e}")
        return ValidationReport(valid=False, errors=[f"Network failed to load: {e}"])

    return NetworkValidator(graph).validate()
