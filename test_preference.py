"""Tests for the dark/light preference controller and the theme flag it drives."""

import unittest
from unittest.mock import Mock

from deskcalendar.core.preference import (
    PreferenceController,
    parse_preference,
    serialize_preference,
)
from deskcalendar.exceptions.errors import PreferenceStorageError
from deskcalendar.storage.memory_storage import MemoryPreferenceStorage
from deskcalendar.ui.theme.colors import COLORS, get_color
from deskcalendar.ui.theme.manager import ThemeManager, apply_dark_flag
from deskcalendar.ui.theme.palettes import DARK_PALETTE, LIGHT_PALETTE


class FailingStorage:
    """Storage whose reads and writes always fail."""

    def __init__(self):
        self.save_attempts = 0

    def load(self, key):
        raise PreferenceStorageError("disk unavailable")

    def save(self, key, value):
        self.save_attempts += 1
        raise PreferenceStorageError("disk unavailable")


class TestPreferenceInitialize(unittest.TestCase):

    def setUp(self):
        ThemeManager.set_theme("light")
        self.applied = []

    def test_stored_value_wins_over_system(self):
        system = Mock(return_value=False)
        storage = MemoryPreferenceStorage({"darkMode": "true"})
        controller = PreferenceController(storage, system, self.applied.append)

        self.assertTrue(controller.initialize())
        self.assertTrue(controller.is_dark)
        self.assertEqual(self.applied, [True])
        system.assert_not_called()

    def test_stored_false_is_respected(self):
        controller = PreferenceController(
            MemoryPreferenceStorage({"darkMode": "false"}), lambda: True, self.applied.append
        )
        self.assertFalse(controller.initialize())
        self.assertEqual(controller.theme, "light")

    def test_absent_value_falls_back_to_system(self):
        controller = PreferenceController(
            MemoryPreferenceStorage(), lambda: True, self.applied.append
        )
        self.assertTrue(controller.initialize())
        self.assertEqual(self.applied, [True])

    def test_initialize_does_not_write(self):
        storage = MemoryPreferenceStorage()
        PreferenceController(storage, lambda: True).initialize()
        self.assertEqual(storage.writes, 0)
        self.assertNotIn("darkMode", storage.values)

    def test_unrecognized_value_means_light(self):
        controller = PreferenceController(
            MemoryPreferenceStorage({"darkMode": "maybe"}), lambda: True
        )
        self.assertFalse(controller.initialize())

    def test_empty_value_falls_back_to_system(self):
        controller = PreferenceController(
            MemoryPreferenceStorage({"darkMode": ""}), lambda: True
        )
        self.assertTrue(controller.initialize())

    def test_storage_failure_falls_back_to_system(self):
        controller = PreferenceController(FailingStorage(), lambda: True)
        with self.assertLogs("deskcalendar.core.preference", level="WARNING"):
            self.assertTrue(controller.initialize())

    def test_system_failure_falls_back_to_light(self):
        def broken_signal():
            raise RuntimeError("no display")

        controller = PreferenceController(FailingStorage(), broken_signal, self.applied.append)
        self.assertFalse(controller.initialize())
        self.assertEqual(self.applied, [False])

    def test_initialize_runs_once(self):
        storage = Mock()
        storage.load.return_value = "true"
        controller = PreferenceController(storage, lambda: False, self.applied.append)

        controller.initialize()
        controller.initialize()

        storage.load.assert_called_once_with("darkMode")
        self.assertEqual(self.applied, [True])


class TestPreferenceToggle(unittest.TestCase):

    def setUp(self):
        ThemeManager.set_theme("light")

    def tearDown(self):
        ThemeManager.set_theme("light")

    def test_every_toggle_persists(self):
        storage = MemoryPreferenceStorage()
        controller = PreferenceController(storage, lambda: False)
        controller.initialize()

        self.assertTrue(controller.toggle())
        self.assertEqual(storage.values["darkMode"], "true")
        self.assertFalse(controller.toggle())
        self.assertEqual(storage.values["darkMode"], "false")
        self.assertEqual(storage.writes, 2)

    def test_double_toggle_round_trips_value_and_presentation(self):
        storage = MemoryPreferenceStorage({"darkMode": "false"})
        controller = PreferenceController(storage, lambda: True, apply_dark_flag)
        controller.initialize()
        self.assertEqual(ThemeManager.get_theme(), "light")

        controller.toggle()
        self.assertEqual(ThemeManager.get_theme(), "dark")
        controller.toggle()

        self.assertEqual(storage.values["darkMode"], "false")
        self.assertEqual(ThemeManager.get_theme(), "light")
        self.assertFalse(controller.is_dark)

    def test_save_failure_keeps_new_state(self):
        storage = FailingStorage()
        applied = []
        controller = PreferenceController(storage, lambda: False, applied.append)
        controller.initialize()

        with self.assertLogs("deskcalendar.core.preference", level="WARNING"):
            self.assertTrue(controller.toggle())
        self.assertTrue(controller.is_dark)
        self.assertEqual(applied, [False, True])
        self.assertEqual(storage.save_attempts, 1)

    def test_new_session_reads_toggled_value(self):
        storage = MemoryPreferenceStorage()
        first = PreferenceController(storage, lambda: False)
        first.initialize()
        first.toggle()

        second = PreferenceController(storage, lambda: False)
        self.assertTrue(second.initialize())


class TestPreferenceSerialization(unittest.TestCase):

    def test_parse(self):
        self.assertTrue(parse_preference("true"))
        self.assertTrue(parse_preference(" TRUE "))
        self.assertFalse(parse_preference("false"))
        self.assertIsNone(parse_preference(None))
        self.assertIsNone(parse_preference(""))
        self.assertIsNone(parse_preference("  "))
        self.assertIs(parse_preference("1"), False)
        self.assertIs(parse_preference("yes"), False)

    def test_serialize(self):
        self.assertEqual(serialize_preference(True), "true")
        self.assertEqual(serialize_preference(False), "false")


class TestThemeManager(unittest.TestCase):

    def setUp(self):
        ThemeManager.set_theme("light")

    def tearDown(self):
        ThemeManager.set_theme("light")

    def test_unknown_theme_is_ignored(self):
        ThemeManager.set_theme("sepia")
        self.assertEqual(ThemeManager.get_theme(), "light")

    def test_apply_dark_flag(self):
        apply_dark_flag(True)
        self.assertTrue(ThemeManager.is_dark())
        apply_dark_flag(False)
        self.assertFalse(ThemeManager.is_dark())

    def test_colors_follow_theme(self):
        self.assertEqual(get_color("accent"), LIGHT_PALETTE["accent"])
        apply_dark_flag(True)
        self.assertEqual(COLORS["accent"], DARK_PALETTE["accent"])

    def test_missing_color_key(self):
        self.assertEqual(get_color("no_such_key"), "#FF00FF")
        self.assertEqual(COLORS.get("no_such_key", "fallback"), "fallback")

    def test_palettes_share_keys(self):
        self.assertEqual(set(LIGHT_PALETTE), set(DARK_PALETTE))


if __name__ == "__main__":
    unittest.main()
