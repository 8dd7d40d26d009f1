"""Tests for fare pricing."""

import math

import pytest

from metro_network.errors import InvalidDistanceError
from metro_network.query.fares import card_fare, fare


@pytest.mark.parametrize(
    ("distance", "expected"),
    [(4, 2), (12, 4), (24, 6), (40, 8), (50, 9)],
)
def test_fare_tier_boundaries(distance: float, expected: float) -> None:
    """Test fares at the upper bound of each tier."""
    assert fare(distance) == pytest.approx(expected)


def test_fare_step_above_fifty() -> None:
    """Test the last tier starts from 10 rather than continuing from 9."""
    assert fare(50) == pytest.approx(9)
    assert fare(50.25) == pytest.approx(10.0125)


@pytest.mark.parametrize(
    ("distance", "expected"),
    [(0, 2), (1.5, 2), (8, 3), (18, 5), (32, 7), (45, 8.5), (70, 11)],
)
def test_fare_within_tiers(distance: float, expected: float) -> None:
    """Test fares inside each tier."""
    assert fare(distance) == pytest.approx(expected)


def test_fare_monotonic() -> None:
    """Test longer trips never cost less."""
    distances = [i * 0.25 for i in range(0, 320)]
    fares = [fare(d) for d in distances]
    assert all(a <= b for a, b in zip(fares, fares[1:]))


@pytest.mark.parametrize("distance", [-0.1, math.inf, math.nan])
def test_fare_invalid_distance(distance: float) -> None:
    """Test negative and non-finite distances are rejected."""
    with pytest.raises(InvalidDistanceError):
        fare(distance)


def test_card_fare() -> None:
    """Test stored-value card discount."""
    assert card_fare(8) == pytest.approx(2.7)
    assert card_fare(8, discount=1.0) == pytest.approx(3.0)


def test_card_fare_invalid_discount() -> None:
    """Test discounts outside (0, 1] are rejected."""
    with pytest.raises(ValueError):
        card_fare(8, discount=0)
