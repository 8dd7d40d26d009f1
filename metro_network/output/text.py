"""Plain-text rendering of query results."""

from metro_network.network.models import (
    ALREADY_AT_DESTINATION,
    NearbyStation,
    RouteOutcome,
    TripPlan,
)


def render_transfers(transfers: dict[str, frozenset[str]]) -> str:
    """One "station -> lines" row per interchange, sorted by station name."""
    if not transfers:
        return "No transfer stations"
    return "\n".join(
        f"{station} -> {', '.join(sorted(lines))}" for station, lines in sorted(transfers.items())
    )


def render_nearby(station: str, max_distance: float, nearby: list[NearbyStation]) -> str:
    if not nearby:
        return f"No stations within {max_distance:g} km of {station}"
    rows = [f"Stations within {max_distance:g} km of {station}:"]
    for item in nearby:
        rows.append(f"  {item.station} ({item.line}, {item.distance:.2f} km)")
    return "\n".join(rows)


def render_route(plan: TripPlan) -> str:
    """Describe a trip as rides and transfers, followed by distance and fares."""
    if isinstance(plan.segments, RouteOutcome):
        if plan.segments is ALREADY_AT_DESTINATION:
            return f"Already at destination: {plan.end}"
        return f"No route found from {plan.start} to {plan.end}"

    steps = []
    for i, segment in enumerate(plan.segments):
        if i > 0:
            steps.append(f"transfer at {segment.from_station} to {segment.line}")
        steps.append(f"take {segment.line} from {segment.from_station} to {segment.to_station}")

    rows = [
        " -> ".join(steps),
        f"Stations: {' - '.join(plan.result.path)}",
        f"Distance: {plan.result.total_distance:.2f} km, transfers: {len(plan.transfers)}",
    ]
    if plan.fare is not None:
        rows.append(render_fare(plan.fare, plan.card_fare))
    return "\n".join(rows)


def render_fare(single: float, card: float | None = None) -> str:
    text = f"Fare: {single:.1f}"
    if card is not None:
        text += f" (card: {card:.1f})"
    return text
