"""Utility functions for DeskCalendar."""

from deskcalendar.utils.date_formatting import (
    as_date,
    format_event_chip,
    format_event_date,
    format_month_title,
    normalize_time_string,
    to_clock_time,
)

__all__ = [
    "as_date",
    "format_event_chip",
    "format_event_date",
    "format_month_title",
    "normalize_time_string",
    "to_clock_time",
]
