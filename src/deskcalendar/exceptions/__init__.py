"""Custom exceptions for DeskCalendar."""

from deskcalendar.exceptions.errors import (
    CalendarError,
    EventValidationError,
    PreferenceStorageError,
)

__all__ = [
    "CalendarError",
    "EventValidationError",
    "PreferenceStorageError",
]
