from datetime import date

import pytest

from livehouse.models import Event
from livehouse.presentation import (
    ALERT,
    NEUTRAL,
    SECONDARY,
    TIME_OPTIONS,
    day_color,
    door_price,
    format_currency,
    is_holiday,
    is_past,
    is_today,
    long_date,
    month_abbr,
    next_event,
    short_date,
    weekday_abbr,
)


def _event(ticket="", door="", d="2026-10-20"):
    return Event(date=d, title="Show", ticket_price=ticket, door_price=door)


@pytest.mark.parametrize("raw, expected", [
    ("2000", "¥2,000"),
    ("¥2,000", "¥2,000"),
    ("1234567", "¥1,234,567"),
    ("0", "¥0"),
    ("free entry", "free entry"),
    ("", ""),
])
def test_format_currency(raw, expected):
    assert format_currency(raw) == expected


@pytest.mark.parametrize("raw", ["2000", "¥2,500", "12,345", "¥ 1 000"])
def test_format_currency_is_idempotent(raw):
    once = format_currency(raw)
    assert format_currency(once) == once


def test_door_price_uses_stored_value():
    assert door_price(_event(ticket="¥2,000", door="¥2,800")) == "¥2,800"
    assert door_price(_event(ticket="", door="Ask at door")) == "Ask at door"


def test_door_price_falls_back_to_advance_plus_500():
    assert door_price(_event(ticket="¥2,000")) == "¥2,500"
    assert door_price(_event(ticket="¥9,800")) == "¥10,300"


def test_door_price_placeholder_when_advance_not_numeric():
    assert door_price(_event(ticket="TBA")) == "---"
    assert door_price(_event(ticket="")) == "---"


def test_day_color():
    assert day_color("2026-10-17") == SECONDARY  # Saturday
    assert day_color("2026-10-18") == ALERT      # Sunday
    assert day_color("2026-10-20") == NEUTRAL    # Tuesday
    assert day_color(date(2026, 11, 3)) == ALERT  # Culture Day, a Tuesday


def test_is_holiday():
    assert is_holiday("2026-01-01")
    assert not is_holiday("2026-10-20")


def test_time_options_are_quarter_hours():
    assert len(TIME_OPTIONS) == 96
    assert TIME_OPTIONS[0] == "00:00"
    assert TIME_OPTIONS[1] == "00:15"
    assert TIME_OPTIONS[-1] == "23:45"
    assert "18:00" in TIME_OPTIONS


def test_date_labels():
    assert month_abbr("2026-10-17") == "Oct"
    assert weekday_abbr("2026-10-17") == "Sat"
    assert long_date("2026-10-17") == "2026.10.17 (Sat)"
    assert short_date("2026-03-05") == "Mar 05"


def test_today_and_past():
    today = date(2026, 10, 17)
    assert is_today("2026-10-17", today)
    assert is_past("2026-10-16", today)
    assert not is_past("2026-10-17", today)


def test_next_event_skips_past_dates():
    today = date(2026, 10, 17)
    events = [_event(d="2026-10-01"), _event(d="2026-10-17"), _event(d="2026-12-01")]
    assert next_event(events, today).date == "2026-10-17"
    assert next_event(events[:1], today) is None
