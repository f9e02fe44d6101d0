"""Active theme state read by the style generators."""

THEMES = ("light", "dark")


class ThemeManager:
    """Process-wide presentation flag.

    Written only through the preference controller's apply callback;
    everything else reads it.
    """

    _theme: str = "light"

    @classmethod
    def get_theme(cls) -> str:
        """Get current theme name ('light' or 'dark')."""
        return cls._theme

    @classmethod
    def set_theme(cls, theme: str) -> None:
        """Set the current theme; unknown names are ignored.

        Args:
            theme: Theme name ('light' or 'dark').
        """
        if theme in THEMES:
            cls._theme = theme

    @classmethod
    def is_dark(cls) -> bool:
        return cls._theme == "dark"


def apply_dark_flag(is_dark: bool) -> None:
    """Set the theme from a boolean dark-mode flag."""
    ThemeManager.set_theme("dark" if is_dark else "light")
