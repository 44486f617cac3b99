"""REST resources served by the fleet backend.

These are read-only snapshots. Field names are snake_case here and
camelCase on the wire. Unknown keys are ignored, and optional keys that
are missing or null take their defaults.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .enums import LocationType


class Resource(BaseModel):
    """Base for backend records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data):
        """Treat explicit nulls as absent so optional fields take their defaults."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Coordinates(Resource):
    """Latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float


class Order(Resource):
    """A delivery order for one product to one destination."""

    id: str
    destination_id: str = ""
    product_id: str = ""
    quantity: float = 0
    delivery_date: str = ""  # YYYY-MM-DD
    assigned_driver_id: str = ""
    vehicle_id: str = ""
    status: str = ""


class Delivery(Resource):
    """A delivery attempt linking a shift to an order."""

    id: str
    shift_id: str = ""
    order_id: str = ""
    status: str = ""
    failure_reason: Optional[str] = None


class Vehicle(Resource):
    """A fleet vehicle and its last known position."""

    id: str
    registration: str = ""
    capacity: float = 0
    type: str = ""
    current_location: Optional[Coordinates] = None


class Driver(Resource):
    """A driver."""

    id: str
    name: str = ""
    license_number: str = Field(
        default="",
        validation_alias=AliasChoices("licenseNumber", "license", "license_number"),
        serialization_alias="licenseNumber",
    )
    phone: str = ""
    status: str = ""


class Product(Resource):
    """A product that can be ordered and stocked."""

    id: str
    name: str = ""
    unit: str = ""
    price_per_unit: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("pricePerUnit", "price", "price_per_unit"),
        serialization_alias="pricePerUnit",
    )


class LocationProduct(Resource):
    """Quantity of one product held at a location."""

    product_id: str = ""
    product_name: str = ""
    quantity: float = 0


class Location(Resource):
    """A stock-holding site (hub or terminal)."""

    id: str
    name: str = ""
    type: LocationType
    address: str = ""
    coordinates: Optional[Coordinates] = None
    products: list[LocationProduct] = Field(default_factory=list)


class Hub(Location):
    """Central distribution hub."""

    type: LocationType = LocationType.HUB


class Terminal(Location):
    """Delivery terminal."""

    type: LocationType = LocationType.TERMINAL
