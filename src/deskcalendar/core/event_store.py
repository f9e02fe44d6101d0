"""In-memory event collection with per-day lookup."""

import logging
import uuid
from datetime import date, datetime
from typing import Dict, Iterator, List, Optional, Union

from deskcalendar.config.constants import DEFAULT_EVENT_DESCRIPTION, DEFAULT_EVENT_TIME
from deskcalendar.core.event_model import Event
from deskcalendar.exceptions.errors import EventValidationError
from deskcalendar.utils.date_formatting import as_date

logger = logging.getLogger(__name__)


class EventStore:
    """Owns the event collection.

    Events keep their insertion order. Ids are generated here and are never
    reused for the lifetime of the store.
    """

    def __init__(self):
        self._events: Dict[str, Event] = {}
        self._issued_ids: set = set()

    def _new_id(self) -> str:
        event_id = uuid.uuid4().hex
        while event_id in self._issued_ids:
            event_id = uuid.uuid4().hex
        return event_id

    def add(
        self,
        title: str,
        day: Union[date, datetime],
        time: str = DEFAULT_EVENT_TIME,
        description: str = DEFAULT_EVENT_DESCRIPTION,
    ) -> Optional[Event]:
        """Create and store a new event.

        Args:
            title: Event title; empty or whitespace-only titles are rejected.
            day: Date of the event.
            time: Time of day in ``HH:MM`` form.
            description: Optional free text.

        Returns:
            The stored Event, or None if the input was rejected.
        """
        try:
            event = Event.create(self._new_id(), title, day, time, description)
        except EventValidationError as e:
            logger.debug("Rejected event draft: %s", e)
            return None

        self._issued_ids.add(event.id)
        self._events[event.id] = event
        logger.info("Added event %s on %s at %s", event.id, event.date.isoformat(), event.time)
        return event

    def remove(self, event_id: str) -> bool:
        """Delete an event by id.

        Returns:
            True if an event was removed, False if the id was unknown.
        """
        if self._events.pop(event_id, None) is None:
            logger.debug("Remove ignored, no event with id %s", event_id)
            return False
        logger.info("Removed event %s", event_id)
        return True

    def get(self, event_id: str) -> Optional[Event]:
        return self._events.get(event_id)

    def events_on(self, day: Union[date, datetime]) -> List[Event]:
        """Events on the given calendar day, in insertion order."""
        target = as_date(day)
        return [event for event in self._events.values() if event.date == target]

    def chronological(self) -> List[Event]:
        """All events ascending by date, then time; ties keep insertion order."""
        return sorted(self._events.values(), key=lambda event: (event.date, event.time))

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events.values()))

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._events
