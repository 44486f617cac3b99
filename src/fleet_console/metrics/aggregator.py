"""
Dashboard Metrics

Reduces one snapshot of orders, deliveries, vehicles, drivers and products
into stat-card numbers and chart series. Everything here is a single pass
over in-memory lists; the only I/O is the fetch in DashboardService.
"""

import logging
from collections import Counter
from datetime import date, timedelta
from typing import Optional

from ..client import ApiClient
from ..config import DAY_NAMES, DELIVERY_STATUS_COLORS, MONTH_NAMES, settings
from ..models import (
    CategoryCount,
    DashboardData,
    DashboardMetrics,
    Delivery,
    DeliveryStatus,
    DriverStatus,
    MonthlyRevenuePoint,
    Order,
    OrderStatus,
    OrdersOverTimePoint,
    StatusSlice,
    Vehicle,
    WeeklyDeliveriesPoint,
)

logger = logging.getLogger(__name__)

SERIES_DAYS = 7
SERIES_MONTHS = 6


# =============================================================================
# Date windows
# =============================================================================

def last_days(today: date, count: int = SERIES_DAYS) -> list[date]:
    """The `count` calendar days ending at `today`, oldest first."""
    return [today - timedelta(days=offset) for offset in range(count - 1, -1, -1)]


def last_months(today: date, count: int = SERIES_MONTHS) -> list[tuple[int, int]]:
    """(year, month) pairs for the `count` months ending at today's month."""
    months = []
    for offset in range(count - 1, -1, -1):
        year, month = today.year, today.month - offset
        while month <= 0:
            month += 12
            year -= 1
        months.append((year, month))
    return months


def day_name(day: date) -> str:
    """Sunday-first short day name."""
    # date.weekday() is Monday=0
    return DAY_NAMES[(day.weekday() + 1) % 7]


# =============================================================================
# Series
# =============================================================================

def get_orders_over_time(orders: list[Order], today: date) -> list[OrdersOverTimePoint]:
    """Orders per delivery date over the last 7 days (exact date match)."""
    per_date = Counter(o.delivery_date for o in orders)
    return [
        OrdersOverTimePoint(date=d.isoformat(), count=per_date[d.isoformat()], status="all")
        for d in last_days(today)
    ]


def get_monthly_revenue(
    orders: list[Order],
    today: date,
    price_per_unit: float,
) -> list[MonthlyRevenuePoint]:
    """Completed-order revenue per month over the last 6 months."""
    points = []
    for year, month in last_months(today):
        key = f"{year}-{month:02d}"
        month_orders = [
            o for o in orders
            if o.status == OrderStatus.COMPLETED and o.delivery_date[:7] == key
        ]
        points.append(MonthlyRevenuePoint(
            month=MONTH_NAMES[month - 1],
            revenue=sum(o.quantity * price_per_unit for o in month_orders),
            orders=len(month_orders),
        ))
    return points


def get_weekly_deliveries(
    deliveries: list[Delivery],
    today: date,
) -> list[WeeklyDeliveriesPoint]:
    """
    Completed deliveries spread evenly over the last 7 days.

    Deliveries carry no completion date, so every day gets the same
    share (completed // 7).
    """
    completed = sum(1 for d in deliveries if d.status == DeliveryStatus.COMPLETED)
    per_day = completed // SERIES_DAYS
    return [
        WeeklyDeliveriesPoint(day=day_name(d), deliveries=per_day)
        for d in last_days(today)
    ]


def get_delivery_status_distribution(deliveries: list[Delivery]) -> list[StatusSlice]:
    """Pie slices by delivery status, zero-valued slices dropped."""
    counts = Counter(d.status for d in deliveries)
    slices = [
        ("Completed", counts[DeliveryStatus.COMPLETED.value]),
        ("In Progress", counts[DeliveryStatus.IN_PROGRESS.value]),
        ("Pending", counts[DeliveryStatus.PENDING.value]),
        ("Failed", counts[DeliveryStatus.FAILED.value]),
    ]
    return [
        StatusSlice(name=name, value=value, color=DELIVERY_STATUS_COLORS[name])
        for name, value in slices
        if value > 0
    ]


def get_vehicle_type_distribution(vehicles: list[Vehicle]) -> list[CategoryCount]:
    """Vehicle counts per type, in first-seen order."""
    counts = Counter(v.type for v in vehicles)
    return [CategoryCount(name=name, value=value) for name, value in counts.items()]


# =============================================================================
# Aggregation
# =============================================================================

def calculate_metrics(
    data: DashboardData,
    today: Optional[date] = None,
    price_per_unit: Optional[float] = None,
) -> DashboardMetrics:
    """
    Derive dashboard metrics from a fetched snapshot.

    Args:
        data: The five resource lists
        today: Last day of the date windows (default: date.today())
        price_per_unit: Flat revenue price (default from settings)

    Returns:
        DashboardMetrics
    """
    today = today or date.today()
    price = settings.DEFAULT_PRICE_PER_UNIT if price_per_unit is None else price_per_unit

    order_counts = Counter(o.status for o in data.orders)
    delivery_counts = Counter(d.status for d in data.deliveries)

    # A vehicle is active while any order assigned to it is still open
    busy_vehicle_ids = {
        o.vehicle_id for o in data.orders if o.status != OrderStatus.COMPLETED
    }
    active_vehicles = sum(1 for v in data.vehicles if v.id in busy_vehicle_ids)

    completed = [o for o in data.orders if o.status == OrderStatus.COMPLETED]
    total_products_delivered = sum(o.quantity for o in completed)

    metrics = DashboardMetrics(
        total_vehicles=len(data.vehicles),
        active_vehicles=active_vehicles,
        total_drivers=len(data.drivers),
        active_drivers=sum(1 for d in data.drivers if d.status == DriverStatus.ACTIVE),
        total_orders=len(data.orders),
        completed_orders=order_counts[OrderStatus.COMPLETED.value],
        pending_orders=order_counts[OrderStatus.PENDING.value],
        in_transit_orders=order_counts[OrderStatus.IN_TRANSIT.value],
        total_deliveries=len(data.deliveries),
        completed_deliveries=delivery_counts[DeliveryStatus.COMPLETED.value],
        pending_deliveries=delivery_counts[DeliveryStatus.PENDING.value],
        in_progress_deliveries=delivery_counts[DeliveryStatus.IN_PROGRESS.value],
        failed_deliveries=delivery_counts[DeliveryStatus.FAILED.value],
        total_revenue=total_products_delivered * price,
        total_products_delivered=total_products_delivered,
        orders_over_time=get_orders_over_time(data.orders, today),
        delivery_status_distribution=get_delivery_status_distribution(data.deliveries),
        vehicle_type_distribution=get_vehicle_type_distribution(data.vehicles),
        monthly_revenue=get_monthly_revenue(data.orders, today, price),
        weekly_deliveries=get_weekly_deliveries(data.deliveries, today),
    )

    logger.info(
        "Metrics: %d orders (%d completed), %d deliveries, %d/%d vehicles active",
        metrics.total_orders,
        metrics.completed_orders,
        metrics.total_deliveries,
        metrics.active_vehicles,
        metrics.total_vehicles,
    )
    return metrics


class DashboardService:
    """Fetches the dashboard snapshot and aggregates it."""

    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or ApiClient()

    async def fetch_all_data(self) -> DashboardData:
        """Fetch all five collections; any failure raises FetchError."""
        return await self.client.fetch_dashboard_data()

    async def calculate_metrics(
        self,
        today: Optional[date] = None,
        price_per_unit: Optional[float] = None,
    ) -> DashboardMetrics:
        data = await self.fetch_all_data()
        return calculate_metrics(data, today=today, price_per_unit=price_per_unit)
