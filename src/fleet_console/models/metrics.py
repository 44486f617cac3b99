"""Dashboard payloads: the fetched snapshot and the derived metrics."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .resources import Delivery, Driver, Order, Product, Vehicle


class DashboardData(BaseModel):
    """One load of the five resource collections the dashboard needs."""

    orders: list[Order] = Field(default_factory=list)
    deliveries: list[Delivery] = Field(default_factory=list)
    vehicles: list[Vehicle] = Field(default_factory=list)
    drivers: list[Driver] = Field(default_factory=list)
    products: list[Product] = Field(default_factory=list)


class ChartModel(BaseModel):
    """Base for chart-facing models (camelCase when dumped by alias)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrdersOverTimePoint(ChartModel):
    date: str
    count: int
    status: str = "all"


class StatusSlice(ChartModel):
    name: str
    value: int
    color: str


class CategoryCount(ChartModel):
    name: str
    value: int


class MonthlyRevenuePoint(ChartModel):
    month: str
    revenue: float
    orders: int


class WeeklyDeliveriesPoint(ChartModel):
    day: str
    deliveries: int


class DashboardMetrics(ChartModel):
    """Summary statistics for stat cards and charts."""

    # Fleet
    total_vehicles: int = 0
    active_vehicles: int = 0
    total_drivers: int = 0
    active_drivers: int = 0

    # Orders
    total_orders: int = 0
    completed_orders: int = 0
    pending_orders: int = 0
    in_transit_orders: int = 0

    # Deliveries
    total_deliveries: int = 0
    completed_deliveries: int = 0
    pending_deliveries: int = 0
    in_progress_deliveries: int = 0
    failed_deliveries: int = 0

    # Revenue & products
    total_revenue: float = 0.0
    total_products_delivered: float = 0.0

    # Series
    orders_over_time: list[OrdersOverTimePoint] = Field(default_factory=list)
    delivery_status_distribution: list[StatusSlice] = Field(default_factory=list)
    vehicle_type_distribution: list[CategoryCount] = Field(default_factory=list)
    monthly_revenue: list[MonthlyRevenuePoint] = Field(default_factory=list)
    weekly_deliveries: list[WeeklyDeliveriesPoint] = Field(default_factory=list)

    @property
    def order_completion_rate(self) -> float:
        """Share of orders completed (0-1)."""
        if self.total_orders == 0:
            return 0.0
        return self.completed_orders / self.total_orders

    @property
    def delivery_success_rate(self) -> float:
        """Completed deliveries over finished (completed + failed) ones."""
        finished = self.completed_deliveries + self.failed_deliveries
        if finished == 0:
            return 0.0
        return self.completed_deliveries / finished
