"""Data models for the fleet console."""

from .enums import (
    OrderStatus,
    DeliveryStatus,
    DriverStatus,
    LocationType,
    StockBand,
    InventorySortField,
    SortDirection,
)
from .resources import (
    Coordinates,
    Order,
    Delivery,
    Vehicle,
    Driver,
    Product,
    LocationProduct,
    Location,
    Hub,
    Terminal,
)
from .metrics import (
    DashboardData,
    DashboardMetrics,
    OrdersOverTimePoint,
    StatusSlice,
    CategoryCount,
    MonthlyRevenuePoint,
    WeeklyDeliveriesPoint,
)

__all__ = [
    # Enums
    "OrderStatus",
    "DeliveryStatus",
    "DriverStatus",
    "LocationType",
    "StockBand",
    "InventorySortField",
    "SortDirection",
    # Resources
    "Coordinates",
    "Order",
    "Delivery",
    "Vehicle",
    "Driver",
    "Product",
    "LocationProduct",
    "Location",
    "Hub",
    "Terminal",
    # Metrics
    "DashboardData",
    "DashboardMetrics",
    "OrdersOverTimePoint",
    "StatusSlice",
    "CategoryCount",
    "MonthlyRevenuePoint",
    "WeeklyDeliveriesPoint",
]
