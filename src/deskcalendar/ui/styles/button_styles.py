"""Button style generators for the UI.

Primary actions use filled terracotta, secondary uses warm outlines,
tertiary actions are ghost-style with hover reveal.
"""

from deskcalendar.ui.theme.colors import get_color
from deskcalendar.ui.theme.scales import BORDER_RADIUS, SPACING_SCALE, TYPOGRAPHY_SCALE
from deskcalendar.ui.styles.base import px


class ButtonStyles:
    """Collection of button style generators."""

    _FONT_STACK = TYPOGRAPHY_SCALE["body"]["font_family"]

    @staticmethod
    def accent() -> str:
        """Primary CTA button - terracotta fill.

        Use for: "New Event", "Add Event"
        """
        return f"""
            QPushButton {{
                background-color: {get_color('accent')};
                color: {get_color('text_on_accent')};
                border: none;
                border-radius: {px(BORDER_RADIUS["sm"])};
                font-family: {ButtonStyles._FONT_STACK};
                font-size: 14px;
                font-weight: 600;
                padding: 8px 18px;
            }}
            QPushButton:hover {{
                background-color: {get_color('accent_hover')};
            }}
            QPushButton:pressed {{
                background-color: {get_color('accent_pressed')};
            }}
            QPushButton:disabled {{
                background-color: {get_color('accent_muted')};
            }}
        """

    @staticmethod
    def secondary() -> str:
        """Secondary button - warm outlined style.

        Use for: month navigation, "Cancel"
        """
        return f"""
            QPushButton {{
                background-color: transparent;
                color: {get_color('text_primary')};
                border: 1px solid {get_color('border_medium')};
                border-radius: {px(BORDER_RADIUS["sm"])};
                font-family: {ButtonStyles._FONT_STACK};
                font-size: 14px;
                font-weight: 500;
                padding: 8px 16px;
            }}
            QPushButton:hover {{
                background-color: {get_color('background_secondary')};
                border-color: {get_color('text_tertiary')};
            }}
            QPushButton:pressed {{
                background-color: {get_color('background_tertiary')};
            }}
        """

    @staticmethod
    def tertiary() -> str:
        """Tertiary button - ghost style with hover reveal.

        Use for: the theme toggle
        """
        return f"""
            QPushButton {{
                background-color: transparent;
                color: {get_color('text_secondary')};
                border: none;
                border-radius: {px(BORDER_RADIUS["md"])};
                font-family: {ButtonStyles._FONT_STACK};
                font-size: 14px;
                font-weight: 500;
                padding: {px(SPACING_SCALE["xs"])} {px(SPACING_SCALE["sm"])};
            }}
            QPushButton:hover {{
                background-color: {get_color('background_tertiary')};
                color: {get_color('text_primary')};
            }}
        """

    @staticmethod
    def danger() -> str:
        """Text-only destructive action, e.g. "Delete"."""
        return f"""
            QPushButton {{
                background-color: transparent;
                color: {get_color('error')};
                border: none;
                font-family: {ButtonStyles._FONT_STACK};
                font-size: 14px;
                font-weight: 500;
                padding: {px(SPACING_SCALE["xxs"])} {px(SPACING_SCALE["xs"])};
            }}
            QPushButton:hover {{
                color: {get_color('accent_hover')};
                text-decoration: underline;
            }}
        """
