"""Main application window for DeskCalendar.

The window owns no calendar state. It forwards input to the
CalendarController and redraws from it on every notification.
"""

import logging
from datetime import date
from typing import List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QFrame, QGridLayout, QHBoxLayout, QLabel, QMainWindow, QPushButton,
    QScrollArea, QVBoxLayout, QWidget
)

from deskcalendar.config.constants import (
    DARK_MODE_LABEL, LIGHT_MODE_LABEL, WEEKDAY_LABELS, WINDOW_TITLE
)
from deskcalendar.config.settings import UI_CONFIG
from deskcalendar.core.controller import CalendarController
from deskcalendar.core.event_store import EventStore
from deskcalendar.core.grid import MonthGrid
from deskcalendar.core.preference import PreferenceController
from deskcalendar.storage.env_storage import EnvPreferenceStorage
from deskcalendar.ui.styles.base import px
from deskcalendar.ui.styles.button_styles import ButtonStyles
from deskcalendar.ui.styles.manager import StyleManager
from deskcalendar.ui.theme.colors import get_color
from deskcalendar.ui.theme.manager import ThemeManager, apply_dark_flag
from deskcalendar.ui.theme.scales import BORDER_RADIUS, SPACING_SCALE, TYPOGRAPHY_SCALE, get_font
from deskcalendar.ui.theme.system import system_prefers_dark
from deskcalendar.ui.widgets.day_cell import DayCell
from deskcalendar.ui.widgets.event_form import EventFormDialog
from deskcalendar.ui.widgets.event_list import UpcomingEventsPanel
from deskcalendar.utils.date_formatting import (
    format_event_chip, format_event_date, format_month_title
)

logger = logging.getLogger(__name__)


def build_controller(storage=None) -> CalendarController:
    """Wire the event store and preference controller for the desktop app.

    Args:
        storage: Preference key-value store; defaults to the per-user .env file.

    Returns:
        A controller whose preference has been initialized.
    """
    preferences = PreferenceController(
        storage if storage is not None else EnvPreferenceStorage(),
        system_prefers_dark=system_prefers_dark,
        apply=apply_dark_flag,
    )
    preferences.initialize()
    return CalendarController(EventStore(), preferences)


class CalendarWindow(QMainWindow):
    """Month view with navigation, day grid, event form and event list."""

    def __init__(self, controller: Optional[CalendarController] = None):
        super().__init__()
        self.controller = controller if controller is not None else build_controller()
        self.style_manager = StyleManager()
        self.day_cells: List[DayCell] = []
        self._rendered_theme: Optional[str] = None
        self._rendered_view: Optional[tuple] = None

        self._init_window_properties()
        self._init_ui()
        self._unsubscribe = self.controller.subscribe(lambda _controller: self.render())
        self.render()

    def _init_window_properties(self) -> None:
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(*UI_CONFIG.min_window_size)
        self.resize(*UI_CONFIG.default_window_size)

    def _init_ui(self) -> None:
        """Build the static widget tree; dynamic parts are filled by render()."""
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        self.setCentralWidget(scroll)

        self.main_container = QWidget()
        self.main_container.setObjectName("mainContainer")
        scroll.setWidget(self.main_container)
        self.style_manager.register("main_container", self.main_container, self._container_style)

        layout = QVBoxLayout(self.main_container)
        layout.setSpacing(SPACING_SCALE["md"])
        layout.setContentsMargins(
            SPACING_SCALE["lg"], SPACING_SCALE["lg"],
            SPACING_SCALE["lg"], SPACING_SCALE["lg"]
        )

        self._add_header_section(layout)
        self._add_navigation_section(layout)
        self._add_grid_section(layout)

        self.events_panel = UpcomingEventsPanel()
        self.events_panel.delete_requested.connect(self.controller.delete_event)
        layout.addWidget(self.events_panel)
        layout.addStretch()

        self.form_dialog = EventFormDialog(self)
        self.form_dialog.title_changed.connect(lambda text: self.controller.update_draft(title=text))
        self.form_dialog.time_changed.connect(lambda text: self.controller.update_draft(time=text))
        self.form_dialog.description_changed.connect(
            lambda text: self.controller.update_draft(description=text)
        )
        self.form_dialog.submit_requested.connect(self._submit_form)
        self.form_dialog.cancel_requested.connect(self.controller.cancel_form)

    def _add_header_section(self, layout: QVBoxLayout) -> None:
        header = QHBoxLayout()
        header.setSpacing(SPACING_SCALE["sm"])

        self.title_label = QLabel(WINDOW_TITLE)
        title_style = TYPOGRAPHY_SCALE["title"]
        self.title_label.setFont(get_font(title_style["size_px"], title_style["weight"]))
        self.style_manager.register(
            "title_label",
            self.title_label,
            lambda: f"QLabel {{ color: {get_color('text_primary')}; }}",
        )
        header.addWidget(self.title_label)
        header.addStretch()

        self.theme_button = QPushButton(DARK_MODE_LABEL)
        self.theme_button.setToolTip("Toggle dark mode")
        self.theme_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.theme_button.clicked.connect(self._toggle_theme)
        self.style_manager.register("theme_button", self.theme_button, ButtonStyles.tertiary)
        header.addWidget(self.theme_button)

        self.new_event_button = QPushButton("New Event")
        self.new_event_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.new_event_button.clicked.connect(self.controller.open_form)
        self.style_manager.register("new_event_button", self.new_event_button, ButtonStyles.accent)
        header.addWidget(self.new_event_button)

        layout.addLayout(header)

    def _add_navigation_section(self, layout: QVBoxLayout) -> None:
        self.month_label = QLabel("")
        headline = TYPOGRAPHY_SCALE["headline"]
        self.style_manager.register(
            "month_label",
            self.month_label,
            lambda: f"""
                QLabel {{
                    font-size: {px(headline["size_px"])};
                    font-weight: {headline["weight"]};
                    color: {get_color('text_primary')};
                }}
            """,
        )
        layout.addWidget(self.month_label)

        nav = QHBoxLayout()
        nav.setSpacing(SPACING_SCALE["xs"])
        self.previous_button = QPushButton("Previous")
        self.previous_button.clicked.connect(self.controller.previous_month)
        self.today_button = QPushButton("Today")
        self.today_button.clicked.connect(self.controller.go_to_today)
        self.next_button = QPushButton("Next")
        self.next_button.clicked.connect(self.controller.next_month)

        for name, button in (
            ("previous_button", self.previous_button),
            ("today_button", self.today_button),
            ("next_button", self.next_button),
        ):
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            self.style_manager.register(name, button, ButtonStyles.secondary)
            nav.addWidget(button)
        nav.addStretch()
        layout.addLayout(nav)

    def _add_grid_section(self, layout: QVBoxLayout) -> None:
        self.grid_widget = QWidget()
        self.grid_layout = QGridLayout(self.grid_widget)
        self.grid_layout.setSpacing(2)
        self.grid_layout.setContentsMargins(0, 0, 0, 0)

        label_style = TYPOGRAPHY_SCALE["label"]
        for column, name in enumerate(WEEKDAY_LABELS):
            label = QLabel(name)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self.style_manager.register(
                f"weekday_{column}",
                label,
                lambda: f"""
                    QLabel {{
                        background-color: {get_color('weekday_header')};
                        color: {get_color('text_primary')};
                        font-size: {px(label_style["size_px"])};
                        font-weight: {label_style["weight"]};
                        border-radius: {px(BORDER_RADIUS["xs"])};
                        padding: {px(SPACING_SCALE["xs"])};
                    }}
                """,
            )
            self.grid_layout.addWidget(label, 0, column)
            self.grid_layout.setColumnStretch(column, 1)

        layout.addWidget(self.grid_widget)

    def _container_style(self) -> str:
        return f"""
            #mainContainer {{
                background-color: {get_color('background_primary')};
            }}
        """

    # Rendering

    def render(self) -> None:
        """Project the controller state onto the widgets."""
        controller = self.controller

        theme = ThemeManager.get_theme()
        if theme != self._rendered_theme:
            self._refresh_all_styles()
            self._rendered_theme = theme
        self.theme_button.setText(LIGHT_MODE_LABEL if controller.is_dark else DARK_MODE_LABEL)

        # Draft edits leave the grid and listing as they are
        upcoming = controller.upcoming_events()
        view = (controller.selected_date, controller.today, theme, tuple(upcoming))
        if view != self._rendered_view:
            self.month_label.setText(format_month_title(controller.selected_date))
            self._render_grid(controller.grid)
            self.events_panel.set_events(upcoming)
            self._rendered_view = view
        self._render_form()

    def _render_grid(self, grid: MonthGrid) -> None:
        for cell in self.day_cells:
            self.grid_layout.removeWidget(cell)
            cell.deleteLater()
        self.day_cells = []

        for row, week in enumerate(grid.weeks(), start=1):
            for column, day in enumerate(week):
                # Only leading blanks are drawn; the last row stays open
                if day is None and self._is_trailing(grid, row, column):
                    continue
                cell = self._build_cell(day)
                self.grid_layout.addWidget(cell, row, column)
                self.day_cells.append(cell)

    @staticmethod
    def _is_trailing(grid: MonthGrid, row: int, column: int) -> bool:
        index = (row - 1) * MonthGrid.COLUMNS + column
        return index >= grid.cell_count

    def _build_cell(self, day: Optional[date]) -> DayCell:
        if day is None:
            return DayCell()
        chips = [
            format_event_chip(event.time, event.title)
            for event in self.controller.events_on(day)
        ]
        cell = DayCell(day, chips, is_today=self.controller.is_today(day))
        cell.clicked.connect(self.controller.select_day)
        return cell

    def _render_form(self) -> None:
        controller = self.controller
        if controller.form_open and not self.form_dialog.isVisible():
            self.form_dialog.load_draft(
                controller.draft, format_event_date(controller.selected_date)
            )
            self.form_dialog.show()
            self.form_dialog.title_input.setFocus()
        elif not controller.form_open and self.form_dialog.isVisible():
            self.form_dialog.hide()

    def _refresh_all_styles(self) -> None:
        self.style_manager.refresh_all()
        self.form_dialog.refresh_theme()
        self.events_panel.refresh_theme()

    # Actions

    def _toggle_theme(self) -> None:
        self.controller.toggle_theme()

    def _submit_form(self) -> None:
        event = self.controller.submit_form()
        if event is None:
            logger.debug("Event form kept open, draft rejected")

    def closeEvent(self, event: QCloseEvent) -> None:
        self._unsubscribe()
        self.form_dialog.hide()
        super().closeEvent(event)
