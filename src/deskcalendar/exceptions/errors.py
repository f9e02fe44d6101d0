"""Exception hierarchy for DeskCalendar."""

from pathlib import Path
from typing import Optional, Union


class CalendarError(Exception):
    """Base class for all DeskCalendar errors."""


class EventValidationError(CalendarError):
    """Raised when event data does not satisfy the event invariants."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid event {field}: {reason}")


class PreferenceStorageError(CalendarError):
    """Raised when the persisted preference cannot be read or written."""

    def __init__(self, reason: str, path: Optional[Union[str, Path]] = None):
        self.reason = reason
        self.path = path
        location = f" ({path})" if path else ""
        super().__init__(f"Preference storage failed{location}: {reason}")
