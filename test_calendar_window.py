import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from datetime import date
from typing import Iterator

import pytest
from PyQt6.QtWidgets import QApplication

from deskcalendar.core.controller import CalendarController
from deskcalendar.core.event_store import EventStore
from deskcalendar.core.preference import PreferenceController
from deskcalendar.storage.memory_storage import MemoryPreferenceStorage
from deskcalendar.ui.main_window import CalendarWindow, build_controller
from deskcalendar.ui.theme.colors import COLORS
from deskcalendar.ui.theme.manager import ThemeManager, apply_dark_flag

TODAY = date(2024, 3, 5)


@pytest.fixture(scope="module")
def qt_app() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def storage() -> MemoryPreferenceStorage:
    return MemoryPreferenceStorage()


@pytest.fixture
def window(qt_app: QApplication, storage: MemoryPreferenceStorage) -> Iterator[CalendarWindow]:
    ThemeManager.set_theme("light")
    preferences = PreferenceController(storage, lambda: False, apply_dark_flag)
    preferences.initialize()
    controller = CalendarController(EventStore(), preferences, today=lambda: TODAY)
    window = CalendarWindow(controller)
    yield window
    window.close()
    ThemeManager.set_theme("light")


def day_cell(window: CalendarWindow, day: int):
    return next(cell for cell in window.day_cells if cell.day is not None and cell.day.day == day)


def test_renders_month_with_leading_blanks(window: CalendarWindow) -> None:
    assert window.month_label.text() == "March 2024"
    # March 2024 starts on a Friday
    assert len(window.day_cells) == 5 + 31
    assert [cell.day for cell in window.day_cells[:5]] == [None] * 5
    assert window.day_cells[5].day == date(2024, 3, 1)
    assert day_cell(window, 5).is_today
    assert not day_cell(window, 6).is_today


def test_navigation_buttons_redraw_grid(window: CalendarWindow) -> None:
    window.next_button.click()
    assert window.month_label.text() == "April 2024"
    # April 2024 starts on a Monday
    assert len(window.day_cells) == 1 + 30

    window.today_button.click()
    window.previous_button.click()
    assert window.month_label.text() == "February 2024"
    assert len(window.day_cells) == 4 + 29


def test_day_click_opens_form_for_that_day(window: CalendarWindow) -> None:
    day_cell(window, 12).clicked.emit(date(2024, 3, 12))

    assert window.controller.selected_date == date(2024, 3, 12)
    assert window.controller.form_open
    assert window.form_dialog.isVisible()
    assert window.form_dialog.title_input.text() == ""
    assert window.form_dialog.time_input.time().toString("HH:mm") == "09:00"


def test_add_event_through_form(window: CalendarWindow) -> None:
    day_cell(window, 12).clicked.emit(date(2024, 3, 12))
    window.form_dialog.title_input.setText("Standup")
    window.form_dialog.description_input.setPlainText("Daily sync")
    window.form_dialog.add_button.click()

    assert not window.controller.form_open
    assert not window.form_dialog.isVisible()

    events = window.controller.upcoming_events()
    assert [(e.title, e.date, e.time, e.description) for e in events] == [
        ("Standup", date(2024, 3, 12), "09:00", "Daily sync")
    ]
    assert day_cell(window, 12).chips == ["09:00 - Standup"]
    assert events[0].id in window.events_panel.delete_buttons


def test_draft_edits_keep_grid_and_listing(window: CalendarWindow) -> None:
    window.new_event_button.click()
    window.form_dialog.title_input.setText("Standup")
    window.form_dialog.add_button.click()
    day_cell(window, 12).clicked.emit(date(2024, 3, 12))
    cells = list(window.day_cells)
    delete_buttons = dict(window.events_panel.delete_buttons)

    window.form_dialog.title_input.setText("Retro")
    window.form_dialog.description_input.setPlainText("Sprint 12")

    assert window.controller.draft.title == "Retro"
    assert window.day_cells == cells
    assert all(a is b for a, b in zip(window.day_cells, cells))
    assert window.events_panel.delete_buttons == delete_buttons

    window.form_dialog.add_button.click()
    assert window.day_cells != cells
    assert day_cell(window, 12).chips == ["09:00 - Retro"]


def test_empty_title_keeps_form_open(window: CalendarWindow) -> None:
    window.new_event_button.click()
    window.form_dialog.add_button.click()

    assert window.controller.form_open
    assert window.form_dialog.isVisible()
    assert window.controller.upcoming_events() == []


def test_cancel_closes_form_and_clears_draft(window: CalendarWindow) -> None:
    window.new_event_button.click()
    window.form_dialog.title_input.setText("Abandoned")
    window.form_dialog.cancel_button.click()

    assert not window.form_dialog.isVisible()
    assert window.controller.draft.is_default()

    window.new_event_button.click()
    assert window.form_dialog.title_input.text() == ""


def test_delete_button_removes_event(window: CalendarWindow) -> None:
    window.new_event_button.click()
    window.form_dialog.title_input.setText("Standup")
    window.form_dialog.add_button.click()
    event = window.controller.upcoming_events()[0]

    window.events_panel.delete_buttons[event.id].click()

    assert window.controller.upcoming_events() == []
    assert window.events_panel.delete_buttons == {}
    assert window.events_panel.empty_label is not None
    assert day_cell(window, 5).chips == []


def test_theme_button_toggles_and_persists(
    window: CalendarWindow, storage: MemoryPreferenceStorage
) -> None:
    assert window.theme_button.text() == "Dark Mode"

    window.theme_button.click()

    assert ThemeManager.get_theme() == "dark"
    assert window.theme_button.text() == "Light Mode"
    assert storage.values["darkMode"] == "true"
    assert COLORS["background_primary"] in window.main_container.styleSheet()

    window.theme_button.click()
    assert ThemeManager.get_theme() == "light"
    assert storage.values["darkMode"] == "false"


def test_build_controller_reads_stored_preference(qt_app: QApplication) -> None:
    storage = MemoryPreferenceStorage({"darkMode": "true"})
    try:
        controller = build_controller(storage)
        assert controller.is_dark
        assert ThemeManager.get_theme() == "dark"
    finally:
        ThemeManager.set_theme("light")
