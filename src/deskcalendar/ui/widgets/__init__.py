"""Reusable UI widgets for DeskCalendar."""

from deskcalendar.ui.widgets.day_cell import DayCell
from deskcalendar.ui.widgets.event_form import EventFormDialog
from deskcalendar.ui.widgets.event_list import UpcomingEventsPanel

__all__ = [
    "DayCell",
    "EventFormDialog",
    "UpcomingEventsPanel",
]
