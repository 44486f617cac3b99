"""Inventory table view model."""

from .view import (
    InventoryFilters,
    InventoryRow,
    InventoryService,
    InventorySummary,
    build_inventory_rows,
    classify_stock,
    filter_rows,
    project_inventory,
    sort_rows,
    summarize_inventory,
    visible_window,
)

__all__ = [
    "InventoryFilters",
    "InventoryRow",
    "InventoryService",
    "InventorySummary",
    "build_inventory_rows",
    "classify_stock",
    "filter_rows",
    "project_inventory",
    "sort_rows",
    "summarize_inventory",
    "visible_window",
]
