"""Modal form for creating an event."""

from PyQt6.QtCore import QTime, pyqtSignal
from PyQt6.QtWidgets import (
    QDialog, QHBoxLayout, QLabel, QLineEdit, QPushButton, QTextEdit,
    QTimeEdit, QVBoxLayout
)

from deskcalendar.config.constants import DEFAULT_EVENT_TIME
from deskcalendar.config.settings import UI_CONFIG
from deskcalendar.core.event_model import DraftEvent
from deskcalendar.ui.styles.base import px
from deskcalendar.ui.styles.button_styles import ButtonStyles
from deskcalendar.ui.styles.manager import StyleManager
from deskcalendar.ui.theme.colors import get_color
from deskcalendar.ui.theme.scales import BORDER_RADIUS, SPACING_SCALE, TYPOGRAPHY_SCALE

TIME_FORMAT = "HH:mm"


class EventFormDialog(QDialog):
    """New Event dialog.

    The dialog never closes itself. It reports edits and button presses
    through signals and the owning window hides it when the form state
    closes.
    """

    title_changed = pyqtSignal(str)
    time_changed = pyqtSignal(str)
    description_changed = pyqtSignal(str)
    submit_requested = pyqtSignal()
    cancel_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("New Event")
        self.setModal(True)
        self.setMinimumWidth(UI_CONFIG.form_min_width)
        self.style_manager = StyleManager()
        self._init_ui()
        self.refresh_theme()

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING_SCALE["md"], SPACING_SCALE["md"],
            SPACING_SCALE["md"], SPACING_SCALE["md"]
        )
        layout.setSpacing(SPACING_SCALE["xs"])

        self.heading = QLabel("New Event")
        self.heading.setObjectName("formHeading")
        layout.addWidget(self.heading)

        self.date_label = QLabel("")
        self.date_label.setObjectName("formDate")
        layout.addWidget(self.date_label)

        layout.addWidget(self._field_label("Title"))
        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Event title")
        self.title_input.textChanged.connect(self.title_changed.emit)
        self.title_input.returnPressed.connect(self.submit_requested.emit)
        layout.addWidget(self.title_input)

        layout.addWidget(self._field_label("Time"))
        self.time_input = QTimeEdit()
        self.time_input.setDisplayFormat(TIME_FORMAT)
        self.time_input.setTime(QTime.fromString(DEFAULT_EVENT_TIME, TIME_FORMAT))
        self.time_input.timeChanged.connect(
            lambda value: self.time_changed.emit(value.toString(TIME_FORMAT))
        )
        layout.addWidget(self.time_input)

        layout.addWidget(self._field_label("Description"))
        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText("Event description")
        self.description_input.setFixedHeight(84)
        self.description_input.textChanged.connect(
            lambda: self.description_changed.emit(self.description_input.toPlainText())
        )
        layout.addWidget(self.description_input)

        buttons = QHBoxLayout()
        buttons.setSpacing(SPACING_SCALE["xs"])
        buttons.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.cancel_requested.emit)
        self.style_manager.register("cancel_button", self.cancel_button, ButtonStyles.secondary)
        buttons.addWidget(self.cancel_button)

        self.add_button = QPushButton("Add Event")
        self.add_button.setDefault(True)
        self.add_button.clicked.connect(self.submit_requested.emit)
        self.style_manager.register("add_button", self.add_button, ButtonStyles.accent)
        buttons.addWidget(self.add_button)

        layout.addLayout(buttons)

    def _field_label(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setObjectName("fieldLabel")
        return label

    def load_draft(self, draft: DraftEvent, date_text: str = "") -> None:
        """Fill the inputs from the draft without echoing change signals."""
        widgets = (self.title_input, self.time_input, self.description_input)
        for widget in widgets:
            widget.blockSignals(True)
        try:
            self.title_input.setText(draft.title)
            self.time_input.setTime(QTime.fromString(draft.time, TIME_FORMAT))
            self.description_input.setPlainText(draft.description)
        finally:
            for widget in widgets:
                widget.blockSignals(False)
        self.date_label.setText(date_text)

    def refresh_theme(self) -> None:
        """Re-apply palette colors to the dialog and its buttons."""
        body = TYPOGRAPHY_SCALE["body"]
        label = TYPOGRAPHY_SCALE["label"]
        headline = TYPOGRAPHY_SCALE["headline"]
        self.setStyleSheet(f"""
            QDialog {{
                background-color: {get_color('surface_elevated')};
            }}
            #formHeading {{
                font-size: {px(headline["size_px"])};
                font-weight: {headline["weight"]};
                color: {get_color('text_primary')};
            }}
            #formDate {{
                color: {get_color('text_secondary')};
            }}
            #fieldLabel {{
                font-size: {px(label["size_px"])};
                font-weight: {label["weight"]};
                color: {get_color('text_secondary')};
            }}
            QLineEdit, QTimeEdit, QTextEdit {{
                font-size: {px(body["size_px"])};
                color: {get_color('text_primary')};
                background-color: {get_color('background_secondary')};
                border: 1px solid {get_color('border_medium')};
                border-radius: {px(BORDER_RADIUS["xs"])};
                padding: 6px;
            }}
        """)
        self.style_manager.refresh_all()

    def reject(self) -> None:
        # Escape and the window close button land here; the form state decides
        self.cancel_requested.emit()
