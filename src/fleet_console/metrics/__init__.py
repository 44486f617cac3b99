"""Dashboard metrics aggregation."""

from .aggregator import DashboardService, calculate_metrics

__all__ = ["DashboardService", "calculate_metrics"]
