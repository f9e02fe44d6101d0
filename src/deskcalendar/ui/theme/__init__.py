"""Theme management for the DeskCalendar UI."""

from deskcalendar.ui.theme.manager import ThemeManager, apply_dark_flag
from deskcalendar.ui.theme.palettes import LIGHT_PALETTE, DARK_PALETTE
from deskcalendar.ui.theme.colors import get_color, COLORS
from deskcalendar.ui.theme.scales import TYPOGRAPHY_SCALE, SPACING_SCALE, BORDER_RADIUS
from deskcalendar.ui.theme.system import system_prefers_dark

__all__ = [
    "ThemeManager",
    "apply_dark_flag",
    "LIGHT_PALETTE",
    "DARK_PALETTE",
    "get_color",
    "COLORS",
    "TYPOGRAPHY_SCALE",
    "SPACING_SCALE",
    "BORDER_RADIUS",
    "system_prefers_dark",
]
