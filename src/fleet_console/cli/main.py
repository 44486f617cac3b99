"""
Fleet Console CLI

Terminal view of the fleet admin dashboard and inventory table.
"""

import asyncio
import json
import logging
import sys
from datetime import datetime
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ..client import FetchError
from ..config import settings
from ..inventory import (
    InventoryFilters,
    InventoryService,
    project_inventory,
    summarize_inventory,
)
from ..metrics import DashboardService
from ..models import InventorySortField, LocationType, SortDirection, StockBand
from ..utils import (
    calculate_distance,
    calculate_eta,
    format_currency,
    format_date,
    format_distance,
    format_duration,
)

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding='utf-8', errors='replace')

app = typer.Typer(
    name="fleet-console",
    help="Fleet Console: fleet and logistics admin dashboard",
    add_completion=False,
)
console = Console()

BAND_STYLES = {
    StockBand.EMPTY: "bold red",
    StockBand.CRITICAL: "red",
    StockBand.LOW: "yellow",
    StockBand.NORMAL: "green",
}


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging for all commands."""
    level = logging.DEBUG if verbose or settings.DEBUG else settings.LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_failed(what: str, error: FetchError) -> None:
    """Show the retry state and exit non-zero."""
    console.print(Panel.fit(
        f"[red]Could not load {what}.[/red]\n"
        f"[dim]{error}[/dim]\n\n"
        "Check the backend and try again.",
        title="Load Failed",
        border_style="red",
    ))
    raise typer.Exit(code=1)


def _qty(value: float) -> str:
    return f"{value:,.0f}" if float(value).is_integer() else f"{value:,.2f}"


# =============================================================================
# Dashboard
# =============================================================================

@app.command()
def dashboard(
    as_json: bool = typer.Option(False, "--json", help="Print raw metrics as JSON"),
):
    """
    Show fleet, order, delivery and revenue metrics.

    Fetches orders, deliveries, vehicles, drivers and products from the
    backend and aggregates them into summary statistics.
    """
    service = DashboardService()

    try:
        metrics = asyncio.run(service.calculate_metrics())
    except FetchError as e:
        _load_failed("dashboard data", e)

    if as_json:
        console.print_json(json.dumps(metrics.model_dump(mode="json", by_alias=True)))
        return

    console.print(Panel.fit(
        f"[bold]{settings.APP_NAME}[/bold]\n"
        f"[dim]{format_date(datetime.now(), include_time=True)}[/dim]",
        title="Dashboard",
    ))

    # Fleet table
    table = Table(title="Fleet")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Vehicles", str(metrics.total_vehicles))
    table.add_row("Active Vehicles", str(metrics.active_vehicles))
    table.add_row("Drivers", str(metrics.total_drivers))
    table.add_row("Active Drivers", str(metrics.active_drivers))

    console.print(table)

    # Orders table
    table = Table(title="Orders")
    table.add_column("Status", style="cyan")
    table.add_column("Count", style="green")

    table.add_row("Total", str(metrics.total_orders))
    table.add_row("Completed", str(metrics.completed_orders))
    table.add_row("Pending", str(metrics.pending_orders))
    table.add_row("In Transit", str(metrics.in_transit_orders))
    table.add_row("Completion Rate", f"{metrics.order_completion_rate:.1%}")

    console.print(table)

    # Deliveries table
    table = Table(title="Deliveries")
    table.add_column("Status", style="cyan")
    table.add_column("Count", style="green")

    table.add_row("Total", str(metrics.total_deliveries))
    for slice_ in metrics.delivery_status_distribution:
        table.add_row(slice_.name, str(slice_.value))
    table.add_row("Success Rate", f"{metrics.delivery_success_rate:.1%}")

    console.print(table)

    # Revenue
    table = Table(title="Revenue (last 6 months)")
    table.add_column("Month", style="cyan")
    table.add_column("Orders", justify="right")
    table.add_column("Revenue", style="green", justify="right")

    for point in metrics.monthly_revenue:
        table.add_row(point.month, str(point.orders), format_currency(point.revenue))
    table.add_row(
        "[bold]Total[/bold]",
        str(metrics.completed_orders),
        f"[bold]{format_currency(metrics.total_revenue)}[/bold]",
    )

    console.print(table)

    # Last 7 days
    table = Table(title="Last 7 Days")
    table.add_column("Date", style="cyan")
    table.add_column("Day")
    table.add_column("Orders", justify="right")
    table.add_column("Deliveries", justify="right")

    for orders_point, deliveries_point in zip(metrics.orders_over_time, metrics.weekly_deliveries):
        table.add_row(
            format_date(orders_point.date),
            deliveries_point.day,
            str(orders_point.count),
            str(deliveries_point.deliveries),
        )

    console.print(table)

    if metrics.vehicle_type_distribution:
        types = ", ".join(f"{c.name}: {c.value}" for c in metrics.vehicle_type_distribution)
        console.print(f"\n[dim]Vehicle types: {types}[/dim]")
    console.print(
        f"[dim]Products delivered: {_qty(metrics.total_products_delivered)}[/dim]"
    )


# =============================================================================
# Inventory
# =============================================================================

@app.command()
def inventory(
    search: str = typer.Option("", "--search", "-s", help="Match location, product or address"),
    location_type: Optional[LocationType] = typer.Option(None, "--type", "-t", help="hub or terminal"),
    stock: Optional[StockBand] = typer.Option(None, "--stock", help="Stock band filter"),
    sort: InventorySortField = typer.Option(
        InventorySortField.LOCATION_NAME, "--sort", help="Sort column"
    ),
    desc: bool = typer.Option(False, "--desc", help="Sort descending"),
    limit: int = typer.Option(50, "--limit", "-l", help="Maximum rows to show"),
):
    """
    Show stock per location and product.

    Rows are filtered by search text, location type and stock band, then
    sorted by a single column.
    """
    service = InventoryService()

    try:
        rows = asyncio.run(service.load())
    except FetchError as e:
        _load_failed("inventory", e)

    summary = summarize_inventory(rows)
    filters = InventoryFilters(search=search, location_type=location_type, stock_band=stock)
    direction = SortDirection.DESC if desc else SortDirection.ASC
    visible = project_inventory(rows, filters, sort, direction)

    console.print(Panel.fit(
        f"Total Items: [bold]{_qty(summary.total_items)}[/bold]  |  "
        f"In Stock: [green]{summary.in_stock_items}[/green]  |  "
        f"Low Stock: [yellow]{summary.low_stock_items}[/yellow]  |  "
        f"Out of Stock: [red]{summary.out_of_stock_items}[/red]  |  "
        f"Locations: {summary.location_count}",
        title="Inventory",
    ))

    if not visible:
        console.print("[yellow]No inventory rows match the filters.[/yellow]")
        return

    table = Table(title=f"Inventory ({len(visible)} rows)")
    table.add_column("Location", style="white", width=22)
    table.add_column("Type", width=9)
    table.add_column("Product", style="cyan", width=20)
    table.add_column("Quantity", justify="right", width=10)
    table.add_column("Stock", width=9)
    table.add_column("Address", style="dim", width=30)

    for row in visible[:limit]:
        style = BAND_STYLES[row.stock_band]
        table.add_row(
            row.location_name[:22],
            row.location_type.value,
            row.product_name[:20],
            _qty(row.quantity),
            f"[{style}]{row.stock_band.value}[/{style}]",
            row.address[:30],
        )

    console.print(table)

    if len(visible) > limit:
        console.print(f"[dim]Showing {limit} of {len(visible)} rows. Use --limit to see more.[/dim]")


# =============================================================================
# Utilities
# =============================================================================

@app.command()
def distance(
    lat1: float = typer.Argument(..., help="Origin latitude"),
    lng1: float = typer.Argument(..., help="Origin longitude"),
    lat2: float = typer.Argument(..., help="Destination latitude"),
    lng2: float = typer.Argument(..., help="Destination longitude"),
    speed: Optional[float] = typer.Option(None, "--speed", help="Average speed in km/h"),
):
    """
    Great-circle distance and ETA between two points.

    Examples:
        fleet-console distance 13.0827 80.2707 12.9716 77.5946
        fleet-console distance 13.0827 80.2707 12.9716 77.5946 --speed 60
    """
    now = datetime.now()
    meters = calculate_distance(lat1, lng1, lat2, lng2)

    try:
        eta = calculate_eta(meters, speed, now=now)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    table = Table(title="Route")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Distance", format_distance(meters))
    table.add_row("Speed", f"{speed or settings.DEFAULT_SPEED_KMH:g} km/h")
    table.add_row("Travel Time", format_duration((eta - now).total_seconds()))
    table.add_row("ETA", format_date(eta, include_time=True))

    console.print(table)


@app.command()
def version():
    """Show version information."""
    console.print(Panel(
        f"[bold]{settings.APP_NAME}[/bold] v{settings.APP_VERSION}\n"
        "Fleet and logistics admin dashboard\n\n"
        f"[dim]Backend: {settings.API_BASE_URL}[/dim]",
        title="Version",
    ))


# =============================================================================
# Entry Point
# =============================================================================

def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
