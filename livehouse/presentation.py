"""
Display-time derivations for events.

Everything here is a pure function of its arguments: nothing is persisted,
and the same helpers back both the Jinja2 filters and the CLI output.
Date labels are formatted by hand (English month/weekday abbreviations)
rather than through the process locale.
"""

import re
from datetime import date
from typing import Iterable, Optional, Union

import holidays
from dateutil import parser as dateparser

from livehouse.models import Event

CURRENCY_SYMBOL = "¥"
DOOR_SURCHARGE = 500
NO_PRICE = "---"

# Day-of-week color classes
ALERT = "alert"          # Sunday or public holiday
SECONDARY = "secondary"  # Saturday
NEUTRAL = "neutral"

_MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
_WEEKDAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# "00:00", "00:15", ... "23:45"
TIME_OPTIONS = [f"{i // 4:02d}:{(i % 4) * 15:02d}" for i in range(96)]

_NON_DIGIT = re.compile(r"[^0-9]")

# Venue is in Tokyo
_HOLIDAYS = holidays.country_holidays("JP")

DateLike = Union[date, str]


def _as_date(value: DateLike) -> date:
    if isinstance(value, date):
        return value
    return dateparser.isoparse(value).date()


def _parse_amount(value: Optional[str]) -> Optional[int]:
    digits = _NON_DIGIT.sub("", value or "")
    if not digits:
        return None
    return int(digits)


def yen(amount: int) -> str:
    return f"{CURRENCY_SYMBOL}{amount:,}"


def format_currency(value: str) -> str:
    """'2000' -> '¥2,000'. Strings without any digit are returned unchanged."""
    amount = _parse_amount(value)
    if amount is None:
        return value
    return yen(amount)


def door_price(event: Event) -> str:
    """
    Price at the door.

    Uses the stored door price when there is one; older events only carry
    the advance price, so the door price is advance + 500. Falls back to
    "---" when the advance price has no number in it.
    """
    if event.door_price:
        return event.door_price
    amount = _parse_amount(event.ticket_price)
    if amount is None:
        return NO_PRICE
    return yen(amount + DOOR_SURCHARGE)


def is_holiday(value: DateLike) -> bool:
    return _as_date(value) in _HOLIDAYS


def day_color(value: DateLike) -> str:
    d = _as_date(value)
    if is_holiday(d) or d.weekday() == 6:
        return ALERT
    if d.weekday() == 5:
        return SECONDARY
    return NEUTRAL


# --- Date labels ---

def month_number(value: DateLike) -> str:
    return str(_as_date(value).month)


def month_abbr(value: DateLike) -> str:
    return _MONTH_ABBR[_as_date(value).month - 1]


def day_number(value: DateLike) -> str:
    return f"{_as_date(value).day:02d}"


def weekday_abbr(value: DateLike) -> str:
    return _WEEKDAY_ABBR[_as_date(value).weekday()]


def long_date(value: DateLike) -> str:
    """2026-10-17 -> '2026.10.17 (Sat)'"""
    d = _as_date(value)
    return f"{d.year}.{d.month:02d}.{d.day:02d} ({weekday_abbr(d)})"


def short_date(value: DateLike) -> str:
    """2026-10-17 -> 'Oct 17'"""
    return f"{month_abbr(value)} {day_number(value)}"


def is_today(value: DateLike, today: Optional[date] = None) -> bool:
    return _as_date(value) == (today or date.today())


def is_past(value: DateLike, today: Optional[date] = None) -> bool:
    return _as_date(value) < (today or date.today())


def next_event(events: Iterable[Event], today: Optional[date] = None) -> Optional[Event]:
    """First event dated today or later; events are expected in date order."""
    today = today or date.today()
    for event in events:
        if not is_past(event.date, today):
            return event
    return None


FILTERS = {
    "currency": format_currency,
    "door_price": door_price,
    "day_color": day_color,
    "month_number": month_number,
    "month_abbr": month_abbr,
    "day_number": day_number,
    "weekday_abbr": weekday_abbr,
    "long_date": long_date,
    "short_date": short_date,
}
