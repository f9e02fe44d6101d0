"""Interaction controller tying navigation, the event form and preferences together."""

import logging
from datetime import date, datetime
from typing import Callable, List, Optional, Union

from deskcalendar.core.event_model import DraftEvent, Event
from deskcalendar.core.event_store import EventStore
from deskcalendar.core.grid import MonthGrid, month_grid, next_month, previous_month
from deskcalendar.core.preference import PreferenceController
from deskcalendar.utils.date_formatting import as_date

logger = logging.getLogger(__name__)

Listener = Callable[["CalendarController"], None]


class CalendarController:
    """View state for the calendar window.

    Every completed mutation notifies subscribed listeners synchronously, so
    the view always reflects the latest state before the next input.
    """

    def __init__(
        self,
        store: Optional[EventStore] = None,
        preferences: Optional[PreferenceController] = None,
        today: Callable[[], date] = date.today,
    ):
        self.store = store if store is not None else EventStore()
        self.preferences = preferences
        self._today = today
        self._selected_date: date = as_date(today())
        self._form_open = False
        self.draft = DraftEvent()
        self._listeners: List[Listener] = []

    # -- observation --------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # -- navigation ---------------------------------------------------------

    @property
    def selected_date(self) -> date:
        return self._selected_date

    @property
    def grid(self) -> MonthGrid:
        return month_grid(self._selected_date)

    def previous_month(self) -> None:
        self._selected_date = previous_month(self._selected_date)
        self._notify()

    def next_month(self) -> None:
        self._selected_date = next_month(self._selected_date)
        self._notify()

    def go_to_today(self) -> None:
        self._selected_date = self.today
        self._notify()

    def select_day(self, day: Union[date, datetime]) -> None:
        """Focus a day cell and open the creation form for it."""
        self._selected_date = as_date(day)
        self._form_open = True
        self._notify()

    @property
    def today(self) -> date:
        return as_date(self._today())

    def is_today(self, day: Optional[date]) -> bool:
        return day is not None and as_date(day) == self.today

    # -- event form ---------------------------------------------------------

    @property
    def form_open(self) -> bool:
        return self._form_open

    def open_form(self) -> None:
        self._form_open = True
        self._notify()

    def cancel_form(self) -> None:
        self._form_open = False
        self.draft.reset()
        self._notify()

    def update_draft(
        self,
        title: Optional[str] = None,
        time: Optional[str] = None,
        description: Optional[str] = None,
    ) -> None:
        """Change draft fields; None leaves a field untouched."""
        if title is not None:
            self.draft.title = title
        if time is not None:
            self.draft.time = time
        if description is not None:
            self.draft.description = description
        self._notify()

    def submit_form(self) -> Optional[Event]:
        """Create an event from the draft on the selected date.

        Returns:
            The new Event, or None if the draft was rejected. A rejected
            draft leaves the form open and the state untouched.
        """
        event = self.store.add(
            self.draft.title,
            self._selected_date,
            self.draft.time,
            self.draft.description,
        )
        if event is None:
            return None
        self.draft.reset()
        self._form_open = False
        self._notify()
        return event

    # -- events -------------------------------------------------------------

    def delete_event(self, event_id: str) -> bool:
        removed = self.store.remove(event_id)
        if removed:
            self._notify()
        return removed

    def events_on(self, day: Union[date, datetime]) -> List[Event]:
        return self.store.events_on(day)

    def upcoming_events(self) -> List[Event]:
        return self.store.chronological()

    # -- theme --------------------------------------------------------------

    @property
    def is_dark(self) -> bool:
        return self.preferences.is_dark if self.preferences is not None else False

    def toggle_theme(self) -> bool:
        if self.preferences is None:
            logger.debug("Theme toggle ignored, no preference controller attached")
            return False
        is_dark = self.preferences.toggle()
        self._notify()
        return is_dark
