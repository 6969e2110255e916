"""Order availability for a restaurant's lunch window.

Every function takes the evaluation instant as an argument; ``now`` only
falls back to the wall clock when a caller leaves it out. Malformed hours
never raise: they close the restaurant with ``HOURS_UNAVAILABLE``.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple
import logging

from lunchpass.domain.HoursRange import HoursRange
from lunchpass.utilities.config import DEFAULT_LUNCH_LABEL, DEFAULT_OPENING_HOURS
from lunchpass.utilities.constants import WEEKDAY_NAMES, WEEKDAY_NAMES_DE, WEEKEND_DAYS

__all__ = [
    "ClosedReason", "Availability", "is_orderable_now", "format_time_12h",
    "parse_hhmm", "day_index", "current_weekday_name", "weekday_name_german",
    "lunch_hours_label", "opening_hours_label", "availability_status", "check_order_allowed",
]

logger = logging.getLogger(__name__)


class ClosedReason(str, Enum):
    WEEKEND = "weekend"
    HOURS_UNAVAILABLE = "hours_unavailable"
    OUTSIDE_HOURS = "outside_hours"


@dataclass(frozen=True)
class Availability:
    is_open: bool
    reason: Optional[ClosedReason] = None

    @classmethod
    def open(cls) -> "Availability":
        return cls(True)

    @classmethod
    def closed(cls, reason: ClosedReason) -> "Availability":
        return cls(False, reason)

    def to_dict(self) -> Dict[str, Any]:
        return {"is_open": self.is_open, "reason": self.reason.value if self.reason else None}


def _resolve_now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now()


def day_index(now: datetime) -> int:
    """Day of week with 0 = Sunday .. 6 = Saturday."""
    return now.isoweekday() % 7


def current_weekday_name(now: Optional[datetime] = None) -> str:
    """Lowercase English weekday name, the key menu items are tagged with."""
    return WEEKDAY_NAMES[day_index(_resolve_now(now))]


def weekday_name_german(now: Optional[datetime] = None) -> str:
    """Uppercase German weekday name used as the menu header."""
    return WEEKDAY_NAMES_DE[day_index(_resolve_now(now))]


def parse_hhmm(value: Optional[str]) -> Optional[Tuple[int, int]]:
    """Split an ``HH:MM`` (or ``HH:MM:SS``) string into (hours, minutes); None if unusable."""
    if not isinstance(value, str) or not value.strip():
        return None
    parts = value.strip().split(":")
    if len(parts) < 2:
        return None
    hours, minutes = parts[0].strip(), parts[1].strip()
    # ASCII digits only; int() rejects superscript digits
    if not (hours.isascii() and hours.isdigit() and minutes.isascii() and minutes.isdigit()):
        return None
    return int(hours), int(minutes)


def _to_minutes(value: Optional[str]) -> Optional[int]:
    parsed = parse_hhmm(value)
    if parsed is None:
        return None
    return parsed[0] * 60 + parsed[1]


def _as_hours(lunch_hours) -> Optional[HoursRange]:
    if lunch_hours is None or isinstance(lunch_hours, HoursRange):
        return lunch_hours
    return HoursRange.from_dict(lunch_hours)


def is_orderable_now(lunch_hours, now: Optional[datetime] = None) -> Availability:
    """Decide whether ordering is allowed at ``now``.

    ``lunch_hours`` is a HoursRange, a {"from", "to"} dict or None. Both
    window ends are inclusive.
    """
    now = _resolve_now(now)
    if day_index(now) in WEEKEND_DAYS:
        return Availability.closed(ClosedReason.WEEKEND)

    hours = _as_hours(lunch_hours)
    if hours is None:
        return Availability.closed(ClosedReason.HOURS_UNAVAILABLE)
    from_minutes = _to_minutes(hours.from_time)
    to_minutes = _to_minutes(hours.to_time)
    if from_minutes is None or to_minutes is None:
        logger.debug("Unusable lunch hours %r", hours)
        return Availability.closed(ClosedReason.HOURS_UNAVAILABLE)

    current_minutes = now.hour * 60 + now.minute
    if from_minutes <= current_minutes <= to_minutes:
        return Availability.open()
    return Availability.closed(ClosedReason.OUTSIDE_HOURS)


def format_time_12h(hhmm: Optional[str]) -> str:
    """Render ``HH:MM`` on a 12-hour clock, e.g. "13:00" -> "1:00 PM"."""
    parsed = parse_hhmm(hhmm)
    if parsed is None:
        return ""
    hours, minutes = parsed
    period = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12}:{minutes:02d} {period}"


def _window_text(hours: HoursRange) -> str:
    return f"{format_time_12h(hours.from_time)} - {format_time_12h(hours.to_time)}"


def lunch_hours_label(lunch_hours) -> str:
    """Restaurant card label such as "Lunch: 12:00 PM - 2:00 PM"."""
    hours = _as_hours(lunch_hours)
    if hours is None or not hours.is_complete():
        return DEFAULT_LUNCH_LABEL
    return f"Lunch: {_window_text(hours)}"


def opening_hours_label(hours_text: Optional[str]) -> str:
    return hours_text or DEFAULT_OPENING_HOURS


def availability_status(lunch_hours, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Headline and message shown above a restaurant menu."""
    now = _resolve_now(now)
    availability = is_orderable_now(lunch_hours, now)
    hours = _as_hours(lunch_hours)
    weekend = availability.reason is ClosedReason.WEEKEND

    if availability.is_open:
        headline = "Open Now"
    elif weekend:
        headline = "Closed (Weekend)"
    else:
        headline = "Closed"

    usable = availability.reason is not ClosedReason.HOURS_UNAVAILABLE
    hours_text = _window_text(hours) if usable and not weekend else ""
    if weekend:
        message = "Orders unavailable on weekends"
    elif usable:
        message = f"Orders available {hours_text}"
    else:
        message = "Lunch hours not available"

    return {
        **availability.to_dict(),
        "headline": headline,
        "hours": hours_text,
        "message": message,
    }


def check_order_allowed(lunch_hours, now: Optional[datetime] = None) -> Optional[Tuple[str, str]]:
    """Gate an order attempt. Returns None when allowed, else (title, message)."""
    availability = is_orderable_now(lunch_hours, now)
    if availability.is_open:
        return None
    if availability.reason is ClosedReason.WEEKEND:
        return "Not Available", "Orders are not available on weekends"
    if availability.reason is ClosedReason.HOURS_UNAVAILABLE:
        return "Error", "Lunch hours not available"
    return "Not Available", f"Orders are only available between {_window_text(_as_hours(lunch_hours))}"
