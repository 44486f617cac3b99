"""Geometry and arithmetic helpers used across the console."""

import math
from collections.abc import Iterable, Mapping
from datetime import datetime, timedelta
from typing import Any, Optional

from ..config import settings

EARTH_RADIUS_M = 6_371_000


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def calculate_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Great-circle distance between two coordinates (haversine).

    Returns:
        Distance in meters
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def calculate_eta(
    distance_m: float,
    speed_kmh: Optional[float] = None,
    now: Optional[datetime] = None,
) -> datetime:
    """
    Estimated time of arrival for a trip.

    Args:
        distance_m: Remaining distance in meters
        speed_kmh: Average speed (default from settings, 40 km/h)
        now: Reference time (default: current time)
    """
    speed = settings.DEFAULT_SPEED_KMH if speed_kmh is None else speed_kmh
    if speed <= 0:
        raise ValueError(f"Speed must be positive, got {speed}")

    hours = distance_m / 1000 / speed
    return (now or datetime.now()) + timedelta(hours=hours)


def calculate_order_total(items: Iterable[Any]) -> float:
    """Sum of quantity x price over order line items (mappings or objects)."""
    total = 0
    for item in items:
        if isinstance(item, Mapping):
            total += item["quantity"] * item["price"]
        else:
            total += item.quantity * item.price
    return total


def calculate_utilization(used: float, capacity: float) -> int:
    """Used / capacity as a whole percentage, clamped to 0-100."""
    if capacity == 0:
        return 0
    return max(0, min(100, round_half_up(used / capacity * 100)))


def calculate_percentage_change(current: float, previous: float) -> int:
    """Whole-percent change from previous to current.

    With no previous value, any growth counts as 100%.
    """
    if previous == 0:
        return 100 if current > 0 else 0
    return round_half_up((current - previous) / previous * 100)


def calculate_average(numbers: Iterable[float]) -> float:
    values = list(numbers)
    if not values:
        return 0
    return sum(values) / len(values)
