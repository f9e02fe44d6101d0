"""UI components for DeskCalendar."""

# Note: UI imports are deferred to avoid a PyQt6 dependency for core usage
# Import specific components as needed:
# from deskcalendar.ui.main_window import CalendarWindow
# from deskcalendar.ui.widgets import DayCell, EventFormDialog, UpcomingEventsPanel
