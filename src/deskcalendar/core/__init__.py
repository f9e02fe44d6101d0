"""Core calendar logic for DeskCalendar. No Qt imports below this package."""

from deskcalendar.core.controller import CalendarController
from deskcalendar.core.event_model import DraftEvent, Event
from deskcalendar.core.event_store import EventStore
from deskcalendar.core.grid import (
    MonthGrid,
    days_in_month,
    first_day_of_month,
    month_grid,
    next_month,
    previous_month,
)
from deskcalendar.core.preference import PreferenceController

__all__ = [
    "CalendarController",
    "DraftEvent",
    "Event",
    "EventStore",
    "MonthGrid",
    "days_in_month",
    "first_day_of_month",
    "month_grid",
    "next_month",
    "previous_month",
    "PreferenceController",
]
