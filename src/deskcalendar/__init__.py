"""
DeskCalendar - Month Calendar Desktop Widget

A PyQt6 desktop application that shows a month grid, keeps dated events
and remembers a dark/light display preference between sessions.
"""

__version__ = "1.0.0"

# Public API - the Qt-free core
from deskcalendar.config.settings import UI_CONFIG, STORAGE_CONFIG
from deskcalendar.exceptions.errors import (
    CalendarError,
    EventValidationError,
    PreferenceStorageError,
)
from deskcalendar.core.controller import CalendarController
from deskcalendar.core.event_model import DraftEvent, Event
from deskcalendar.core.event_store import EventStore
from deskcalendar.core.grid import MonthGrid, month_grid
from deskcalendar.core.preference import PreferenceController

__all__ = [
    # Version
    "__version__",
    # Config
    "UI_CONFIG",
    "STORAGE_CONFIG",
    # Exceptions
    "CalendarError",
    "EventValidationError",
    "PreferenceStorageError",
    # Core
    "CalendarController",
    "DraftEvent",
    "Event",
    "EventStore",
    "MonthGrid",
    "month_grid",
    "PreferenceController",
]
