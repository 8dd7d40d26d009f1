"""Distance-based fare pricing."""

import math

from metro_network.errors import InvalidDistanceError

BASE_FARE = 2.0
BASE_DISTANCE = 4.0  # km covered by the base fare

# (lower bound km, fare at lower bound, km per additional unit)
FARE_TIERS: tuple[tuple[float, float, float], ...] = (
    (50.0, 10.0, 20.0),
    (40.0, 8.0, 10.0),
    (24.0, 6.0, 8.0),
    (12.0, 4.0, 6.0),
    (BASE_DISTANCE, BASE_FARE, 4.0),
)

CARD_DISCOUNT = 0.9  # stored-value card price relative to a single ticket


def fare(distance: float) -> float:
    """Single-journey fare for a trip of the given length in km."""
    if not math.isfinite(distance) or distance < 0:
        raise InvalidDistanceError(f"Cannot price a trip of {distance} km")

    for lower, base, km_per_unit in FARE_TIERS:
        if distance > lower:
            return base + (distance - lower) / km_per_unit

    return BASE_FARE


def card_fare(distance: float, discount: float = CARD_DISCOUNT) -> float:
    """Fare charged to a stored-value card."""
    if not 0 < discount <= 1:
        raise ValueError(f"Discount must be in (0, 1], got {discount}")
    return fare(distance) * discount
