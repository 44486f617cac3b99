"""
Inventory View Model

Flattens hubs and terminals into one row per (location, product), classifies
each row into a stock band, and projects the table through search, filters
and a single-key sort. Projections are recomputed from scratch; nothing here
mutates its inputs.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..client import ApiClient
from ..config import settings
from ..models import (
    Hub,
    InventorySortField,
    Location,
    LocationType,
    SortDirection,
    StockBand,
    Terminal,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InventoryRow:
    """One product held at one location."""

    location_id: str
    location_name: str
    location_type: LocationType
    address: str
    product_id: str
    product_name: str
    quantity: float
    stock_band: StockBand


@dataclass
class InventoryFilters:
    """Table filters. None means 'all'."""

    search: str = ""
    location_type: Optional[LocationType] = None
    stock_band: Optional[StockBand] = None

    def matches(self, row: InventoryRow) -> bool:
        """Check a row against search, type and band."""
        if self.location_type is not None and row.location_type != self.location_type:
            return False
        if self.stock_band is not None and row.stock_band != self.stock_band:
            return False

        term = self.search.strip().lower()
        if not term:
            return True
        return (
            term in row.location_name.lower()
            or term in row.product_name.lower()
            or term in row.address.lower()
        )


@dataclass
class InventorySummary:
    """Numbers behind the inventory stat cards."""

    total_items: float = 0
    in_stock_items: int = 0
    low_stock_items: int = 0
    out_of_stock_items: int = 0
    location_count: int = 0
    band_counts: dict[StockBand, int] = field(
        default_factory=lambda: {band: 0 for band in StockBand}
    )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "total_items": self.total_items,
            "in_stock_items": self.in_stock_items,
            "low_stock_items": self.low_stock_items,
            "out_of_stock_items": self.out_of_stock_items,
            "location_count": self.location_count,
            "band_counts": {band.value: count for band, count in self.band_counts.items()},
        }


# =============================================================================
# Rows
# =============================================================================

def classify_stock(
    quantity: float,
    critical: Optional[int] = None,
    low: Optional[int] = None,
) -> StockBand:
    """
    Classify a stock quantity.

    <= 0 is empty, below `critical` is critical, below `low` is low,
    anything else is normal. Thresholds default to settings.
    """
    critical = settings.CRITICAL_STOCK_THRESHOLD if critical is None else critical
    low = settings.LOW_STOCK_THRESHOLD if low is None else low

    if quantity <= 0:
        return StockBand.EMPTY
    if quantity < critical:
        return StockBand.CRITICAL
    if quantity < low:
        return StockBand.LOW
    return StockBand.NORMAL


def _location_rows(location: Location) -> list[InventoryRow]:
    return [
        InventoryRow(
            location_id=location.id,
            location_name=location.name,
            location_type=LocationType(location.type),
            address=location.address,
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity,
            stock_band=classify_stock(item.quantity),
        )
        for item in location.products
    ]


def build_inventory_rows(
    hubs: Iterable[Hub],
    terminals: Iterable[Terminal],
) -> list[InventoryRow]:
    """One row per (location, product); hubs first, then terminals."""
    rows = []
    for location in [*hubs, *terminals]:
        rows.extend(_location_rows(location))
    return rows


# =============================================================================
# Projection
# =============================================================================

def filter_rows(rows: Iterable[InventoryRow], filters: InventoryFilters) -> list[InventoryRow]:
    return [row for row in rows if filters.matches(row)]


def _sort_key(field_name: InventorySortField):
    if field_name == InventorySortField.QUANTITY:
        return lambda row: row.quantity
    if field_name == InventorySortField.STOCK_BAND:
        return lambda row: row.stock_band.severity
    if field_name == InventorySortField.LOCATION_TYPE:
        return lambda row: row.location_type.value
    return lambda row: getattr(row, field_name.value).lower()


def sort_rows(
    rows: Iterable[InventoryRow],
    field_name: InventorySortField = InventorySortField.LOCATION_NAME,
    direction: SortDirection = SortDirection.ASC,
) -> list[InventoryRow]:
    """
    Stable single-key sort.

    Text compares case-insensitively, stock bands by severity. Ties keep
    their incoming order in both directions.
    """
    return sorted(
        rows,
        key=_sort_key(InventorySortField(field_name)),
        reverse=SortDirection(direction) == SortDirection.DESC,
    )


def project_inventory(
    rows: Iterable[InventoryRow],
    filters: Optional[InventoryFilters] = None,
    field_name: InventorySortField = InventorySortField.LOCATION_NAME,
    direction: SortDirection = SortDirection.ASC,
) -> list[InventoryRow]:
    """Filter then sort: the rows the table shows."""
    return sort_rows(filter_rows(rows, filters or InventoryFilters()), field_name, direction)


def summarize_inventory(rows: Iterable[InventoryRow]) -> InventorySummary:
    summary = InventorySummary()
    locations = set()
    for row in rows:
        locations.add((row.location_type, row.location_id))
        summary.total_items += row.quantity
        summary.band_counts[row.stock_band] += 1
        if row.quantity > 0:
            summary.in_stock_items += 1

    summary.out_of_stock_items = summary.band_counts[StockBand.EMPTY]
    summary.low_stock_items = (
        summary.band_counts[StockBand.CRITICAL] + summary.band_counts[StockBand.LOW]
    )
    summary.location_count = len(locations)
    return summary


def visible_window(
    total_rows: int,
    scroll_offset: float,
    row_height: float,
    viewport_height: float,
    overscan: int = 5,
) -> tuple[int, int]:
    """
    Row index range [start, end) a virtualized table should render.

    Args:
        total_rows: Rows after filtering
        scroll_offset: Pixels scrolled from the top
        row_height: Fixed row height in pixels
        viewport_height: Visible height in pixels
        overscan: Extra rows rendered above and below the viewport
    """
    if row_height <= 0:
        raise ValueError(f"Row height must be positive, got {row_height}")
    if total_rows <= 0:
        return (0, 0)

    first = math.floor(max(scroll_offset, 0) / row_height)
    visible = math.ceil(max(viewport_height, 0) / row_height)

    start = max(0, min(first - overscan, total_rows))
    end = max(start, min(first + visible + overscan, total_rows))
    return (start, end)


class InventoryService:
    """Loads hubs and terminals and flattens them into rows."""

    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or ApiClient()

    async def load(self) -> list[InventoryRow]:
        hubs, terminals = await self.client.fetch_locations()
        rows = build_inventory_rows(hubs, terminals)
        logger.info(
            "Inventory: %d rows from %d hubs and %d terminals",
            len(rows), len(hubs), len(terminals),
        )
        return rows
