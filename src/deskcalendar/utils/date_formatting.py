"""Date and time formatting utilities."""

import re
from datetime import date, datetime
from typing import Union

from dateutil import parser as dateutil_parser

# "HH:MM" in 24-hour form, single-digit hours allowed on input
CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")

# "7pm", "7 pm", "7:30am"
MERIDIEM_PATTERN = re.compile(r"^\d{1,2}(?::\d{2})?\s*(?:am|pm)$", re.IGNORECASE)


def normalize_time_string(time_str: str) -> str:
    """Handle common human formats like '20:00h' or '20h15' before parsing.

    Args:
        time_str: The time string to normalize.

    Returns:
        A cleaned time string, not yet validated.
    """
    if not isinstance(time_str, str):
        return str(time_str)

    s = time_str.strip()

    # Convert European "20.00" to "20:00"
    if re.match(r"^\d{1,2}\.\d{2}$", s):
        s = s.replace(".", ":")

    # Handle "20:00h", "20h", "20h15", "20h15m" styles
    match = re.match(r"^\s*(\d{1,2})(?:[:\.]?(\d{2}))?\s*h(?:rs?)?\.?\s*$", s, re.IGNORECASE)
    if match:
        hour = int(match.group(1))
        minute = match.group(2) or "00"
        return f"{hour:02d}:{minute}"

    match = re.match(r"^\s*(\d{1,2})h(\d{2})m?\s*$", s, re.IGNORECASE)
    if match:
        hour = int(match.group(1))
        minute = match.group(2)
        return f"{hour:02d}:{minute}"

    return s


def to_clock_time(time_str: str) -> str:
    """Convert a time-of-day string to 24-hour ``HH:MM``.

    Args:
        time_str: Input such as '09:00', '9:30', '20h15' or '7pm'.

    Returns:
        The zero-padded ``HH:MM`` form.

    Raises:
        ValueError: If the input is not a valid time of day.
    """
    s = normalize_time_string(time_str)

    match = CLOCK_PATTERN.match(s)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour > 23 or minute > 59:
            raise ValueError(f"Time out of range: {time_str!r}")
        return f"{hour:02d}:{minute:02d}"

    if MERIDIEM_PATTERN.match(s):
        parsed = dateutil_parser.parse(s)
        return parsed.strftime("%H:%M")

    raise ValueError(f"Unrecognized time of day: {time_str!r}")


def as_date(value: Union[date, datetime]) -> date:
    """Truncate a datetime to its calendar date; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def format_month_title(value: date) -> str:
    """Return the grid heading, e.g. 'March 2024'."""
    return f"{value:%B} {value.year}"


def format_event_date(value: date) -> str:
    """Return the date shown in the upcoming list, e.g. 'Tue, Mar 05 2024'."""
    return value.strftime("%a, %b %d %Y")


def format_event_chip(time: str, title: str) -> str:
    """Return the label used inside a day cell."""
    return f"{time} - {title}"
