"""Shared fixtures: backend payloads and a fake HTTP transport."""

from typing import Optional

import httpx
import pytest

from fleet_console.client import ApiClient


MOCK_ORDERS = [
    {
        "id": "1",
        "destinationId": "dest-1",
        "productId": "prod-1",
        "quantity": 100,
        "deliveryDate": "2024-01-15",
        "assignedDriverId": "driver-1",
        "vehicleId": "vehicle-1",
        "status": "completed",
    },
    {
        "id": "2",
        "destinationId": "dest-2",
        "productId": "prod-2",
        "quantity": 50,
        "deliveryDate": "2024-01-16",
        "assignedDriverId": "driver-2",
        "vehicleId": "vehicle-2",
        "status": "pending",
    },
    {
        "id": "3",
        "destinationId": "dest-3",
        "productId": "prod-3",
        "quantity": 75,
        "deliveryDate": "2024-01-17",
        "assignedDriverId": "driver-3",
        "vehicleId": "vehicle-1",
        "status": "in-transit",
    },
]

MOCK_DELIVERIES = [
    {"id": "1", "shiftId": "shift-1", "orderId": "1", "status": "completed", "failureReason": None},
    {"id": "2", "shiftId": "shift-2", "orderId": "2", "status": "pending", "failureReason": None},
    {"id": "3", "shiftId": "shift-3", "orderId": "3", "status": "in-progress", "failureReason": None},
    {"id": "4", "shiftId": "shift-4", "orderId": "4", "status": "failed", "failureReason": "Customer not available"},
]

MOCK_VEHICLES = [
    {
        "id": "vehicle-1",
        "registration": "ABC123",
        "capacity": 1000,
        "type": "Truck",
        "currentLocation": {"lat": 40.7128, "lng": -74.006},
    },
    {
        "id": "vehicle-2",
        "registration": "XYZ789",
        "capacity": 500,
        "type": "Van",
        "currentLocation": {"lat": 34.0522, "lng": -118.2437},
    },
]

MOCK_DRIVERS = [
    {"id": "driver-1", "name": "John Doe", "licenseNumber": "DL123", "phone": "1234567890", "status": "active"},
    {"id": "driver-2", "name": "Jane Smith", "licenseNumber": "DL456", "phone": "0987654321", "status": "active"},
    {"id": "driver-3", "name": "Bob Johnson", "licenseNumber": "DL789", "phone": "5555555555", "status": "inactive"},
]

MOCK_PRODUCTS = [
    {"id": "prod-1", "name": "Product A", "unit": "kg", "pricePerUnit": 50},
    {"id": "prod-2", "name": "Product B", "unit": "liters", "pricePerUnit": 30},
]

MOCK_HUBS = [
    {
        "id": "hub-1",
        "name": "Central Hub",
        "type": "hub",
        "address": "12 Anna Salai, Chennai",
        "coordinates": {"lat": 13.0827, "lng": 80.2707},
        "products": [
            {"productId": "prod-1", "productName": "Diesel", "quantity": 1200},
            {"productId": "prod-2", "productName": "Petrol", "quantity": 50},
            {"productId": "prod-3", "productName": "Kerosene", "quantity": 0},
        ],
    },
    {
        "id": "hub-2",
        "name": "North Hub",
        "type": "hub",
        "address": "5 GST Road, Chennai",
        "coordinates": {"lat": 13.1500, "lng": 80.2500},
    },
]

MOCK_TERMINALS = [
    {
        "id": "terminal-1",
        "name": "Airport Terminal",
        "type": "terminal",
        "address": "Meenambakkam, Chennai",
        "coordinates": {"lat": 12.9941, "lng": 80.1709},
        "products": [
            {"productId": "prod-1", "productName": "Diesel", "quantity": 300},
            {"productId": "prod-4", "productName": "Lubricant", "quantity": 99},
        ],
    },
    {
        "id": "terminal-2",
        "name": "Port Terminal",
        "type": "terminal",
        "address": "Ennore Port",
        "coordinates": {"lat": 13.2333, "lng": 80.3333},
        "products": [
            {"productId": "prod-2", "productName": "Petrol", "quantity": 500},
        ],
    },
]

BACKEND_ROUTES = {
    "/orders": MOCK_ORDERS,
    "/deliveries": MOCK_DELIVERIES,
    "/vehicles": MOCK_VEHICLES,
    "/drivers": MOCK_DRIVERS,
    "/products": MOCK_PRODUCTS,
    "/hubs": MOCK_HUBS,
    "/terminals": MOCK_TERMINALS,
}


def make_transport(
    routes: Optional[dict] = None,
    failing: Optional[dict[str, int]] = None,
) -> httpx.MockTransport:
    """
    Build a fake backend.

    Args:
        routes: path -> JSON payload (default: BACKEND_ROUTES)
        failing: path -> HTTP status code to return instead
    """
    routes = BACKEND_ROUTES if routes is None else routes
    failing = failing or {}

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path in failing:
            return httpx.Response(failing[path], json={"error": "boom"})
        if path in routes:
            return httpx.Response(200, json=routes[path])
        return httpx.Response(404, json={"error": "Unknown endpoint"})

    return httpx.MockTransport(handler)


@pytest.fixture
def api_client() -> ApiClient:
    """Client wired to the fake backend."""
    return ApiClient(base_url="http://backend.test", transport=make_transport())
