"""
Fleet Backend Client

Read-only HTTP client for the fleet REST backend. Every collection is a
plain GET with no parameters returning a JSON list. Batches are issued
concurrently and joined; one failing request fails the whole batch.
"""

import asyncio
import logging
from typing import Optional, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..config import settings
from ..models import (
    DashboardData,
    Delivery,
    Driver,
    Hub,
    Order,
    Product,
    Terminal,
    Vehicle,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class FleetConsoleError(Exception):
    """Base error for the fleet console."""


class FetchError(FleetConsoleError):
    """A backend request failed (network, status, or payload)."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to fetch {path}: {reason}")


class ApiClient:
    """
    Client for the fleet backend collections.

    Each public method opens one httpx.AsyncClient for its batch so the
    client holds no connection state between dashboard loads.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Backend base URL (default from settings)
            transport: Custom httpx transport, e.g. httpx.MockTransport in tests
        """
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.transport = transport

    def _session(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, transport=self.transport)

    async def _get_list(
        self,
        client: httpx.AsyncClient,
        path: str,
        model: type[T],
    ) -> list[T]:
        """GET a collection and parse it into models."""
        logger.debug("GET %s%s", self.base_url, path)
        try:
            res = await client.get(path)
            res.raise_for_status()
            return TypeAdapter(list[model]).validate_python(res.json())
        except (httpx.HTTPError, ValueError) as e:
            # ValidationError and JSONDecodeError are both ValueErrors
            reason = _describe(e)
            logger.error("Error fetching %s: %s", path, reason)
            raise FetchError(path, reason) from e

    # =========================================================================
    # Single collections
    # =========================================================================

    async def get_orders(self) -> list[Order]:
        async with self._session() as client:
            return await self._get_list(client, "/orders", Order)

    async def get_deliveries(self) -> list[Delivery]:
        async with self._session() as client:
            return await self._get_list(client, "/deliveries", Delivery)

    async def get_vehicles(self) -> list[Vehicle]:
        async with self._session() as client:
            return await self._get_list(client, "/vehicles", Vehicle)

    async def get_drivers(self) -> list[Driver]:
        async with self._session() as client:
            return await self._get_list(client, "/drivers", Driver)

    async def get_products(self) -> list[Product]:
        async with self._session() as client:
            return await self._get_list(client, "/products", Product)

    async def get_hubs(self) -> list[Hub]:
        async with self._session() as client:
            return await self._get_list(client, "/hubs", Hub)

    async def get_terminals(self) -> list[Terminal]:
        async with self._session() as client:
            return await self._get_list(client, "/terminals", Terminal)

    # =========================================================================
    # Batches
    # =========================================================================

    async def fetch_dashboard_data(self) -> DashboardData:
        """
        Fetch the five dashboard collections concurrently.

        Returns:
            DashboardData with all lists populated

        Raises:
            FetchError: if any single request fails
        """
        async with self._session() as client:
            orders, deliveries, vehicles, drivers, products = await asyncio.gather(
                self._get_list(client, "/orders", Order),
                self._get_list(client, "/deliveries", Delivery),
                self._get_list(client, "/vehicles", Vehicle),
                self._get_list(client, "/drivers", Driver),
                self._get_list(client, "/products", Product),
            )

        logger.debug(
            "Fetched %d orders, %d deliveries, %d vehicles, %d drivers, %d products",
            len(orders), len(deliveries), len(vehicles), len(drivers), len(products),
        )
        return DashboardData(
            orders=orders,
            deliveries=deliveries,
            vehicles=vehicles,
            drivers=drivers,
            products=products,
        )

    async def fetch_locations(self) -> tuple[list[Hub], list[Terminal]]:
        """Fetch hubs and terminals concurrently."""
        async with self._session() as client:
            hubs, terminals = await asyncio.gather(
                self._get_list(client, "/hubs", Hub),
                self._get_list(client, "/terminals", Terminal),
            )
        return hubs, terminals


def _describe(error: Exception) -> str:
    """Short human-readable reason for a failed request."""
    if isinstance(error, httpx.HTTPStatusError):
        return f"HTTP {error.response.status_code}"
    if isinstance(error, ValidationError):
        return f"unexpected payload ({error.error_count()} errors)"
    if isinstance(error, httpx.HTTPError):
        return str(error) or error.__class__.__name__
    return f"invalid JSON: {error}"
