"""Pure helpers: calculations, display formatting, validation."""

from .calculations import (
    calculate_distance,
    calculate_eta,
    calculate_order_total,
    calculate_utilization,
    calculate_percentage_change,
    calculate_average,
)
from .formatters import (
    format_currency,
    format_date,
    format_phone_number,
    format_distance,
    format_duration,
    format_registration_number,
)
from .validators import (
    is_valid_phone_number,
    is_valid_email,
    is_valid_registration_number,
    is_valid_license_number,
    is_valid_coordinates,
    is_future_date,
    is_past_date,
)

__all__ = [
    "calculate_distance",
    "calculate_eta",
    "calculate_order_total",
    "calculate_utilization",
    "calculate_percentage_change",
    "calculate_average",
    "format_currency",
    "format_date",
    "format_phone_number",
    "format_distance",
    "format_duration",
    "format_registration_number",
    "is_valid_phone_number",
    "is_valid_email",
    "is_valid_registration_number",
    "is_valid_license_number",
    "is_valid_coordinates",
    "is_future_date",
    "is_past_date",
]
