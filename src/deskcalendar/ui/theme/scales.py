"""Typography and spacing scales for the calendar UI."""

# =============================================================================
# FONT FAMILIES
# =============================================================================
# Qt stylesheets don't handle font-family reliably on macOS, so widgets that
# need an exact face should use get_font() instead.

FONT_FAMILIES = {
    "sans": "-apple-system, 'Segoe UI', 'Helvetica Neue', sans-serif",
}

FONT_SANS = FONT_FAMILIES["sans"]


def get_font(size: int = 14, weight: int = 400) -> "QFont":
    """Create a QFont in the default system family.

    Args:
        size: Font size in points
        weight: Font weight (400=normal, 600=semibold, 700=bold)

    Returns:
        QFont object configured with the specified properties.
    """
    from PyQt6.QtGui import QFont

    font = QFont()
    font.setPointSize(size)
    font.setWeight(QFont.Weight(weight))
    return font


# =============================================================================
# TYPOGRAPHY SCALE
# =============================================================================

TYPOGRAPHY_SCALE = {
    "title": {"size_px": 28, "weight": 700, "font_family": FONT_SANS},
    "headline": {"size_px": 20, "weight": 600, "font_family": FONT_SANS},
    "body": {"size_px": 15, "weight": 400, "font_family": FONT_SANS},
    "caption": {"size_px": 13, "weight": 400, "font_family": FONT_SANS},
    "chip": {"size_px": 11, "weight": 500, "font_family": FONT_SANS},
    "label": {"size_px": 12, "weight": 600, "font_family": FONT_SANS},
}

# 8px base unit
SPACING_SCALE = {
    "xxs": 4,
    "xs": 8,
    "sm": 16,
    "md": 24,
    "lg": 32,
}

BORDER_RADIUS = {
    "xs": 4,
    "sm": 8,
    "md": 12,
}
