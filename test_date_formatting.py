from datetime import date, datetime

import pytest

from deskcalendar.utils.date_formatting import (
    as_date,
    format_event_chip,
    format_event_date,
    format_month_title,
    normalize_time_string,
    to_clock_time,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("09:00", "09:00"),
        ("9:00", "09:00"),
        (" 23:59 ", "23:59"),
        ("9.30", "09:30"),
        ("20h", "20:00"),
        ("20h15", "20:15"),
        ("18:00h", "18:00"),
        ("7pm", "19:00"),
        ("7:30 am", "07:30"),
        ("12am", "00:00"),
    ],
)
def test_to_clock_time(raw: str, expected: str) -> None:
    assert to_clock_time(raw) == expected


@pytest.mark.parametrize("raw", ["", "24:00", "9:60", "tomorrow", "2024"])
def test_to_clock_time_rejects(raw: str) -> None:
    with pytest.raises(ValueError):
        to_clock_time(raw)


def test_normalize_passes_through_unknown_formats() -> None:
    assert normalize_time_string("  lunch ") == "lunch"
    assert normalize_time_string(930) == "930"


def test_as_date() -> None:
    assert as_date(datetime(2024, 3, 5, 18, 30)) == date(2024, 3, 5)
    assert as_date(date(2024, 3, 5)) == date(2024, 3, 5)


def test_display_formats() -> None:
    assert format_month_title(date(2024, 3, 5)) == "March 2024"
    assert format_event_date(date(2024, 3, 5)) == "Tue, Mar 05 2024"
    assert format_event_chip("09:00", "Standup") == "09:00 - Standup"
