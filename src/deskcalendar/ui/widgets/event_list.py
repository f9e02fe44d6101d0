"""Ascending list of all events with per-event delete."""

from typing import Dict, List, Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from deskcalendar.config.constants import EMPTY_EVENTS_MESSAGE, UPCOMING_EVENTS_TITLE
from deskcalendar.core.event_model import Event
from deskcalendar.ui.styles.base import px
from deskcalendar.ui.styles.button_styles import ButtonStyles
from deskcalendar.ui.theme.colors import get_color
from deskcalendar.ui.theme.scales import BORDER_RADIUS, SPACING_SCALE, TYPOGRAPHY_SCALE
from deskcalendar.utils.date_formatting import format_event_date


class UpcomingEventsPanel(QWidget):
    """Lists events and emits ``delete_requested`` with an event id."""

    delete_requested = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.delete_buttons: Dict[str, QPushButton] = {}

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(SPACING_SCALE["xs"])

        self.heading = QLabel(UPCOMING_EVENTS_TITLE)
        self._layout.addWidget(self.heading)

        self.rows = QVBoxLayout()
        self.rows.setSpacing(SPACING_SCALE["xs"])
        self._layout.addLayout(self.rows)

        self.empty_label: Optional[QLabel] = None
        self._events: List[Event] = []
        self.refresh_theme()

    def set_events(self, events: List[Event]) -> None:
        """Rebuild the rows for ``events`` in the order given."""
        self._events = list(events)
        self._clear_rows()
        self.delete_buttons.clear()

        if not self._events:
            self.empty_label = QLabel(EMPTY_EVENTS_MESSAGE)
            self.empty_label.setWordWrap(True)
            self.empty_label.setStyleSheet(f"color: {get_color('text_tertiary')};")
            self.rows.addWidget(self.empty_label)
            return

        self.empty_label = None
        for event in self._events:
            self.rows.addWidget(self._build_row(event))

    def _clear_rows(self) -> None:
        while self.rows.count():
            item = self.rows.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

    def _build_row(self, event: Event) -> QFrame:
        row = QFrame()
        row.setObjectName("eventRow")
        row.setStyleSheet(f"""
            #eventRow {{
                background-color: {get_color('surface_elevated')};
                border: 1px solid {get_color('border_light')};
                border-radius: {px(BORDER_RADIUS["sm"])};
            }}
            #eventTitle {{
                color: {get_color('text_primary')};
                font-weight: 600;
            }}
            #eventMeta, #eventDescription {{
                color: {get_color('text_secondary')};
                font-size: {px(TYPOGRAPHY_SCALE["caption"]["size_px"])};
            }}
        """)
        layout = QHBoxLayout(row)
        layout.setContentsMargins(
            SPACING_SCALE["sm"], SPACING_SCALE["xs"],
            SPACING_SCALE["sm"], SPACING_SCALE["xs"]
        )

        text = QVBoxLayout()
        text.setSpacing(2)
        title = QLabel(event.title)
        title.setObjectName("eventTitle")
        text.addWidget(title)

        meta = QLabel(f"{format_event_date(event.date)} at {event.time}")
        meta.setObjectName("eventMeta")
        text.addWidget(meta)

        if event.description:
            description = QLabel(event.description)
            description.setObjectName("eventDescription")
            description.setWordWrap(True)
            text.addWidget(description)

        layout.addLayout(text, 1)

        delete_button = QPushButton("Delete")
        delete_button.setStyleSheet(ButtonStyles.danger())
        delete_button.clicked.connect(lambda _=False, event_id=event.id: self.delete_requested.emit(event_id))
        layout.addWidget(delete_button)
        self.delete_buttons[event.id] = delete_button

        return row

    def refresh_theme(self) -> None:
        headline = TYPOGRAPHY_SCALE["headline"]
        self.heading.setStyleSheet(f"""
            QLabel {{
                font-size: {px(headline["size_px"])};
                font-weight: {headline["weight"]};
                color: {get_color('text_primary')};
            }}
        """)
        self.set_events(self._events)
