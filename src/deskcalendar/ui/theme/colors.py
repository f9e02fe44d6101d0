"""Dynamic color access based on current theme."""

from deskcalendar.ui.theme.manager import ThemeManager
from deskcalendar.ui.theme.palettes import LIGHT_PALETTE, DARK_PALETTE

MISSING_COLOR = "#FF00FF"


def get_color(key: str) -> str:
    """Get color from current theme palette.

    Args:
        key: Color key name (e.g., 'text_primary', 'accent').

    Returns:
        Hex color string, or magenta for missing keys.
    """
    palette = DARK_PALETTE if ThemeManager.is_dark() else LIGHT_PALETTE
    return palette.get(key, MISSING_COLOR)


class _DynamicColors:
    """Dict-like accessor that always reads the active palette."""

    def __getitem__(self, key: str) -> str:
        return get_color(key)

    def get(self, key: str, default: str = "") -> str:
        result = get_color(key)
        return result if result != MISSING_COLOR else default


COLORS = _DynamicColors()
