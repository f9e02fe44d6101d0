"""Centralized constants for DeskCalendar."""

APP_NAME = "DeskCalendar"

# Draft defaults
DEFAULT_EVENT_TIME = "09:00"
DEFAULT_EVENT_TITLE = ""
DEFAULT_EVENT_DESCRIPTION = ""

# Persisted preference (stored as the string "true" / "false")
PREFERENCE_KEY = "darkMode"
PREFERENCE_TRUE = "true"
PREFERENCE_FALSE = "false"

# Grid header, first column is Sunday (weekday index 0)
WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# Display strings
WINDOW_TITLE = "Calendar"
UPCOMING_EVENTS_TITLE = "Upcoming Events"
EMPTY_EVENTS_MESSAGE = (
    'No events scheduled. Click on any date or the "New Event" button to add an event.'
)
DARK_MODE_LABEL = "Dark Mode"
LIGHT_MODE_LABEL = "Light Mode"
