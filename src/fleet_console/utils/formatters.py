"""Display formatting for console output.

Conventions follow the admin console: Indian rupee grouping by default,
day-month-year dates, 5+5 phone numbers, metres below one kilometre.
"""

import re
from datetime import date, datetime
from typing import Optional, Union

from ..config import CURRENCY_SYMBOLS, MONTH_NAMES, settings
from .calculations import round_half_up

INVALID_DATE = "Invalid Date"


def _group_indian(digits: str) -> str:
    """Group an integer string as 12,34,567 (lakh/crore style)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(amount: float, currency: Optional[str] = None) -> str:
    """
    Format an amount of money with symbol and two decimals.

    Examples:
        format_currency(1500.5)          -> "₹1,500.50"
        format_currency(1234567)         -> "₹12,34,567.00"
        format_currency(-20, "USD")      -> "-$20.00"
    """
    code = (currency or settings.DEFAULT_CURRENCY).upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")

    text = f"{abs(amount):.2f}"
    whole, fraction = text.split(".")
    if code == "INR":
        whole = _group_indian(whole)
    else:
        whole = f"{int(whole):,}"

    sign = "-" if amount < 0 and text != "0.00" else ""
    return f"{sign}{symbol}{whole}.{fraction}"


def parse_iso_datetime(text: str) -> datetime:
    """
    Parse an ISO 8601 timestamp as the backend sends it.

    A trailing 'Z' is read as UTC. Raises ValueError when unparseable.
    """
    text = text.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_date(value: Union[date, datetime, str], include_time: bool = False) -> str:
    """Format as '15 Jan 2024', or '15 Jan 2024, 10:30' with time."""
    if isinstance(value, str):
        try:
            value = parse_iso_datetime(value)
        except ValueError:
            return INVALID_DATE

    text = f"{value.day} {MONTH_NAMES[value.month - 1]} {value.year}"
    if include_time:
        hour = getattr(value, "hour", 0)
        minute = getattr(value, "minute", 0)
        text += f", {hour:02d}:{minute:02d}"
    return text


def format_phone_number(phone: str) -> str:
    """Format a 10-digit number as '98765 43210'; anything else is unchanged."""
    digits = re.sub(r"\D", "", phone)
    if len(digits) == 10:
        return f"{digits[:5]} {digits[5:]}"
    return phone


def format_distance(meters: float) -> str:
    """'500m' below a kilometre, '1.5km' from there on."""
    if meters < 1000:
        return f"{round_half_up(meters)}m"
    return f"{meters / 1000:.1f}km"


def format_duration(seconds: float) -> str:
    """
    Human-readable duration.

    Under a minute: '45s'. Under an hour: '12m'. Otherwise '2h' or '1h 30m'
    (whole minutes, leftover seconds dropped).
    """
    seconds = int(seconds)
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        return f"{seconds // 60}m"

    hours, remainder = divmod(seconds, 3600)
    minutes = remainder // 60
    if minutes:
        return f"{hours}h {minutes}m"
    return f"{hours}h"


def format_registration_number(registration: str) -> str:
    """Canonical registration: no whitespace, uppercase (e.g. TN01AB1234)."""
    return re.sub(r"\s+", "", registration).upper()
