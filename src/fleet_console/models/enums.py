"""Enumerations for the fleet console."""

from enum import Enum


class OrderStatus(str, Enum):
    """Status of an order."""

    PENDING = "pending"
    IN_TRANSIT = "in-transit"
    COMPLETED = "completed"


class DeliveryStatus(str, Enum):
    """Status of a delivery attempt within a shift."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    FAILED = "failed"


class DriverStatus(str, Enum):
    """Status of a driver."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    AVAILABLE = "available"


class LocationType(str, Enum):
    """Kinds of stock-holding locations."""

    HUB = "hub"
    TERMINAL = "terminal"


class StockBand(str, Enum):
    """Stock level classification, most severe first."""

    EMPTY = "empty"
    CRITICAL = "critical"
    LOW = "low"
    NORMAL = "normal"

    @property
    def severity(self) -> int:
        """Rank used for sorting (0 = most severe)."""
        return _BAND_ORDER.index(self)


_BAND_ORDER = [StockBand.EMPTY, StockBand.CRITICAL, StockBand.LOW, StockBand.NORMAL]


class InventorySortField(str, Enum):
    """Columns the inventory table can be sorted by."""

    LOCATION_NAME = "location_name"
    LOCATION_TYPE = "location_type"
    PRODUCT_NAME = "product_name"
    QUANTITY = "quantity"
    ADDRESS = "address"
    STOCK_BAND = "stock_band"


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"
