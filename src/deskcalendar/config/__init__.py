"""Configuration module for DeskCalendar."""

from deskcalendar.config.settings import UI_CONFIG, STORAGE_CONFIG, UIConfig, StorageConfig
from deskcalendar.config.constants import (
    APP_NAME,
    DEFAULT_EVENT_TIME,
    PREFERENCE_KEY,
    WEEKDAY_LABELS,
    EMPTY_EVENTS_MESSAGE,
)

__all__ = [
    "UI_CONFIG",
    "STORAGE_CONFIG",
    "UIConfig",
    "StorageConfig",
    "APP_NAME",
    "DEFAULT_EVENT_TIME",
    "PREFERENCE_KEY",
    "WEEKDAY_LABELS",
    "EMPTY_EVENTS_MESSAGE",
]
