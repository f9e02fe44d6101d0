"""Style utilities for the DeskCalendar UI."""

from deskcalendar.ui.styles.base import px
from deskcalendar.ui.styles.button_styles import ButtonStyles
from deskcalendar.ui.styles.manager import StyleManager

__all__ = [
    "px",
    "ButtonStyles",
    "StyleManager",
]
