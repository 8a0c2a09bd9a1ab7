import sys
from argparse import Namespace

import pytest
import responses as rsps

from livehouse.cli import _event_from_args, _parse_date, main
from livehouse.models import Event


def _args(**kw):
    fields = ("date", "title", "artists", "description", "open_time", "start_time",
              "ticket_price", "door_price", "image_url")
    return Namespace(**{f: kw.get(f) for f in fields})


@pytest.mark.parametrize("raw", ["2026-10-20", "20/10/2026", "Oct 20 2026"])
def test_parse_date(raw):
    assert _parse_date(raw) == "2026-10-20"


@pytest.mark.parametrize("raw, expected", [
    ("2026-03-04", "2026-03-04"),
    ("2026-12-01", "2026-12-01"),
    ("04/03/2026", "2026-03-04"),
])
def test_parse_date_low_day_numbers(raw, expected):
    assert _parse_date(raw) == expected


def test_parse_date_rejects_garbage():
    with pytest.raises(SystemExit):
        _parse_date("someday")


def test_edit_keeps_unspecified_fields_and_formats_prices():
    current = Event(id=5, date="2026-10-20", title="Old", artists="Band", ticket_price="¥2,000")
    updated = _event_from_args(_args(title="New", door_price="3000"), current)
    assert updated.title == "New"
    assert updated.artists == "Band"
    assert updated.ticket_price == "¥2,000"
    assert updated.door_price == "¥3,000"
    assert current.title == "Old"


@rsps.activate
def test_events_list_reports_unreachable_server(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", [
        "livehouse", "--config", str(tmp_path / "missing.toml"),
        "events", "--url", "http://venue.test", "list",
    ])
    with pytest.raises(SystemExit) as info:
        main()
    assert info.value.code == 1
    assert capsys.readouterr().err.startswith("Error: Could not reach http://venue.test")
