"""Event data model for calendar events."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Union

from deskcalendar.config.constants import (
    DEFAULT_EVENT_DESCRIPTION,
    DEFAULT_EVENT_TIME,
    DEFAULT_EVENT_TITLE,
)
from deskcalendar.exceptions.errors import EventValidationError
from deskcalendar.utils.date_formatting import as_date, to_clock_time


@dataclass(frozen=True)
class Event:
    """A single-day calendar event. Immutable once created."""

    id: str
    title: str
    date: date
    time: str = DEFAULT_EVENT_TIME
    description: str = DEFAULT_EVENT_DESCRIPTION

    @classmethod
    def create(
        cls,
        event_id: str,
        title: str,
        day: Union[date, datetime],
        time: str = DEFAULT_EVENT_TIME,
        description: str = DEFAULT_EVENT_DESCRIPTION,
    ) -> "Event":
        """Validate raw input and build an Event.

        Args:
            event_id: Identifier assigned by the owning store.
            title: Event title; surrounding whitespace is stripped.
            day: Calendar date; a datetime is truncated to its date.
            time: Time of day, normalized to ``HH:MM``.
            description: Optional free text.

        Returns:
            A validated Event instance.

        Raises:
            EventValidationError: If the title is empty or the time is invalid.
        """
        clean_title = (title or "").strip()
        if not clean_title:
            raise EventValidationError("title", "must not be empty")
        if not isinstance(day, date):
            raise EventValidationError("date", f"expected a date, got {type(day).__name__}")
        try:
            clock = to_clock_time(time or DEFAULT_EVENT_TIME)
        except ValueError as e:
            raise EventValidationError("time", str(e)) from e

        return cls(
            id=event_id,
            title=clean_title,
            date=as_date(day),
            time=clock,
            description=description or "",
        )

    @classmethod
    def from_dict(cls, data: Dict) -> "Event":
        """Create an Event from a dictionary produced by ``to_dict``.

        Raises:
            EventValidationError: If required fields are missing or invalid.
        """
        missing = {"id", "title", "date"} - set(data.keys())
        if missing:
            raise EventValidationError(", ".join(sorted(missing)), "missing")
        day = data["date"]
        if isinstance(day, str):
            try:
                day = date.fromisoformat(day)
            except ValueError as e:
                raise EventValidationError("date", str(e)) from e
        return cls.create(
            event_id=str(data["id"]),
            title=data["title"],
            day=day,
            time=data.get("time", DEFAULT_EVENT_TIME),
            description=data.get("description", DEFAULT_EVENT_DESCRIPTION),
        )

    def to_dict(self) -> Dict:
        """Convert to a plain dictionary.

        Returns:
            Dictionary representation of the event.
        """
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date.isoformat(),
            "time": self.time,
            "description": self.description,
        }


@dataclass
class DraftEvent:
    """Unsaved form data for the event being created."""

    title: str = DEFAULT_EVENT_TITLE
    time: str = DEFAULT_EVENT_TIME
    description: str = DEFAULT_EVENT_DESCRIPTION

    def reset(self) -> None:
        """Restore the form defaults."""
        self.title = DEFAULT_EVENT_TITLE
        self.time = DEFAULT_EVENT_TIME
        self.description = DEFAULT_EVENT_DESCRIPTION

    def is_default(self) -> bool:
        return self == DraftEvent()
