"""Tests for distance, ETA and arithmetic helpers."""

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from fleet_console.utils.calculations import (
    calculate_average,
    calculate_distance,
    calculate_eta,
    calculate_order_total,
    calculate_percentage_change,
    calculate_utilization,
    round_half_up,
)

CHENNAI = (13.0827, 80.2707)
BANGALORE = (12.9716, 77.5946)


class TestDistance:
    """Haversine distance in meters."""

    def test_chennai_to_bangalore(self):
        """Chennai to Bangalore is roughly 290 km as the crow flies"""
        distance = calculate_distance(*CHENNAI, *BANGALORE)
        assert 280_000 < distance < 300_000, f"Expected ~290km, got {distance:.0f}m"

    def test_same_point_is_zero(self):
        assert calculate_distance(*CHENNAI, *CHENNAI) == 0

    def test_short_distance(self):
        """0.009 degrees of latitude is about one kilometre"""
        distance = calculate_distance(13.0827, 80.2707, 13.0917, 80.2707)
        assert 900 < distance < 1100

    @pytest.mark.parametrize("a, b", [
        (CHENNAI, BANGALORE),
        ((40.7128, -74.006), (34.0522, -118.2437)),
        ((-33.8688, 151.2093), (51.5074, -0.1278)),
    ])
    def test_symmetric(self, a, b):
        forward = calculate_distance(*a, *b)
        backward = calculate_distance(*b, *a)
        assert forward == pytest.approx(backward), (
            f"Distance must not depend on direction: {forward} vs {backward}"
        )


class TestETA:
    """Arrival time from distance and average speed."""

    NOW = datetime(2024, 1, 15, 12, 0, 0)

    def test_default_speed(self):
        """10 km at the default 40 km/h takes 15 minutes"""
        eta = calculate_eta(10_000, now=self.NOW)
        assert eta - self.NOW == timedelta(minutes=15)

    def test_custom_speed(self):
        eta = calculate_eta(10_000, 60, now=self.NOW)
        assert eta - self.NOW == timedelta(minutes=10)

    def test_zero_distance(self):
        assert calculate_eta(0, now=self.NOW) == self.NOW

    def test_without_reference_time(self):
        before = datetime.now()
        eta = calculate_eta(10_000)
        assert timedelta(minutes=14) < eta - before < timedelta(minutes=16)

    @pytest.mark.parametrize("speed", [0, -20])
    def test_non_positive_speed_rejected(self, speed):
        with pytest.raises(ValueError):
            calculate_eta(1000, speed, now=self.NOW)


class TestOrderTotal:
    """Sum of quantity x price."""

    def test_multiple_items(self):
        items = [
            {"quantity": 2, "price": 100},
            {"quantity": 3, "price": 50},
            {"quantity": 1, "price": 200},
        ]
        assert calculate_order_total(items) == 550

    def test_empty(self):
        assert calculate_order_total([]) == 0

    def test_decimal_prices(self):
        items = [{"quantity": 2, "price": 99.99}, {"quantity": 1, "price": 50.50}]
        assert calculate_order_total(items) == pytest.approx(250.48)

    def test_objects_with_attributes(self):
        items = [SimpleNamespace(quantity=4, price=25), SimpleNamespace(quantity=1, price=10)]
        assert calculate_order_total(items) == 110

    def test_linear_in_quantity(self):
        """Doubling one item's quantity adds exactly one more quantity x price"""
        base = [{"quantity": 3, "price": 40}, {"quantity": 5, "price": 7}]
        doubled = [{"quantity": 6, "price": 40}, {"quantity": 5, "price": 7}]
        assert calculate_order_total(doubled) - calculate_order_total(base) == 3 * 40


class TestUtilization:
    """Used / capacity as a clamped whole percentage."""

    @pytest.mark.parametrize("used, capacity, expected", [
        (50, 100, 50),
        (75, 100, 75),
        (100, 100, 100),
        (0, 100, 0),
        (33, 100, 33),
        (2, 3, 67),
        (1, 3, 33),
    ])
    def test_percentage(self, used, capacity, expected):
        assert calculate_utilization(used, capacity) == expected

    def test_capped_at_100(self):
        assert calculate_utilization(150, 100) == 100

    def test_never_negative(self):
        assert calculate_utilization(-10, 100) == 0

    def test_zero_capacity(self):
        assert calculate_utilization(50, 0) == 0


class TestPercentageChange:
    """Whole-percent change between two values."""

    @pytest.mark.parametrize("current, previous, expected", [
        (150, 100, 50),
        (200, 100, 100),
        (50, 100, -50),
        (25, 100, -75),
        (100, 100, 0),
    ])
    def test_change(self, current, previous, expected):
        assert calculate_percentage_change(current, previous) == expected

    def test_zero_previous(self):
        """With nothing before, growth counts as 100% and no growth as 0%"""
        assert calculate_percentage_change(100, 0) == 100
        assert calculate_percentage_change(1, 0) == 100
        assert calculate_percentage_change(0, 0) == 0
        assert calculate_percentage_change(-5, 0) == 0


class TestAverage:
    def test_average(self):
        assert calculate_average([10, 20, 30]) == 20
        assert calculate_average([5, 10, 15, 20]) == 12.5

    def test_empty(self):
        assert calculate_average([]) == 0

    def test_negative_and_decimal(self):
        assert calculate_average([-10, 0, 10]) == 0
        assert calculate_average([-5, -10, -15]) == -10
        assert calculate_average([1.5, 2.5, 3.5]) == pytest.approx(2.5)

    def test_accepts_generators(self):
        assert calculate_average(x for x in [2, 4]) == 3


class TestRounding:
    def test_halves_round_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(-2.5) == -2
        assert round_half_up(2.4) == 2
