"""Input validators for master data (drivers, vehicles, locations)."""

import re
from datetime import date, datetime
from typing import Optional, Union

from .formatters import parse_iso_datetime

PHONE_PATTERN = re.compile(r"^[6-9]\d{9}$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# XX00XX0000, e.g. TN01AB1234
REGISTRATION_PATTERN = re.compile(r"^[A-Z]{2}\d{2}[A-Z]{2}\d{4}$")
# XX0000000000000
LICENSE_PATTERN = re.compile(r"^[A-Z]{2}\d{13}$")

DateLike = Union[date, datetime, str]


def is_valid_phone_number(phone: str) -> bool:
    """Indian mobile number: 10 digits starting with 6-9."""
    return bool(PHONE_PATTERN.match(re.sub(r"\D", "", phone)))


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def is_valid_registration_number(registration: str) -> bool:
    """Indian vehicle registration, spaces and case ignored."""
    cleaned = re.sub(r"\s+", "", registration).upper()
    return bool(REGISTRATION_PATTERN.match(cleaned))


def is_valid_license_number(license_number: str) -> bool:
    """Indian driving licence, spaces and case ignored."""
    cleaned = re.sub(r"\s+", "", license_number).upper()
    return bool(LICENSE_PATTERN.match(cleaned))


def is_valid_coordinates(lat: float, lng: float) -> bool:
    return -90 <= lat <= 90 and -180 <= lng <= 180


def _to_datetime(value: DateLike) -> Optional[datetime]:
    if isinstance(value, str):
        try:
            return parse_iso_datetime(value)
        except ValueError:
            return None
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    return value


def _local_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def _compare_to_now(value: DateLike, now: Optional[datetime]) -> Optional[int]:
    """Sign of (value - now), or None when value is unparseable."""
    moment = _to_datetime(value)
    if moment is None:
        return None
    if now is None:
        now = datetime.now(moment.tzinfo)
    elif (moment.tzinfo is None) != (now.tzinfo is None):
        # mixed aware/naive: compare both as local wall-clock time
        moment, now = _local_naive(moment), _local_naive(now)
    return (moment > now) - (moment < now)


def is_future_date(value: DateLike, now: Optional[datetime] = None) -> bool:
    """True if the date lies after now. Unparseable strings are never in the future."""
    return _compare_to_now(value, now) == 1


def is_past_date(value: DateLike, now: Optional[datetime] = None) -> bool:
    """True if the date lies before now. Unparseable strings are never in the past."""
    return _compare_to_now(value, now) == -1
