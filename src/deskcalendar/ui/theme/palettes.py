"""Color palettes for light and dark themes.

Warm paper tones for light mode, deep charcoal for dark mode, with a
terracotta accent shared by both.
"""

LIGHT_PALETTE = {
    # Text hierarchy
    "text_primary": "#2D2926",
    "text_secondary": "#6B625A",
    "text_tertiary": "#9A918A",
    "text_placeholder": "#B8AFA8",
    "text_on_accent": "#FFFFFF",

    # Backgrounds
    "background_primary": "#FDFBF7",
    "background_secondary": "#F7F4EE",
    "background_tertiary": "#F0EBE3",

    # Borders
    "border_light": "#E8E2D9",
    "border_medium": "#D4CCC2",

    # Accent
    "accent": "#CC5A47",
    "accent_hover": "#B8483A",
    "accent_pressed": "#A03C2E",
    "accent_muted": "#D9CFC6",

    # Status
    "error": "#B8483A",

    # Grid
    "weekday_header": "#F0EBE3",
    "cell_background": "#FFFFFF",
    "cell_hover": "#F7F4EE",
    "cell_blank": "#F7F4EE",
    "today_outline": "#CC5A47",
    "event_chip": "#F5DDD6",
    "event_chip_text": "#2D2926",

    # Surfaces
    "surface_elevated": "#FFFFFF",
}

DARK_PALETTE = {
    # Text hierarchy
    "text_primary": "#F5F2EC",
    "text_secondary": "#B8AFA8",
    "text_tertiary": "#847B74",
    "text_placeholder": "#6B625A",
    "text_on_accent": "#FFFFFF",

    # Backgrounds
    "background_primary": "#1E1B18",
    "background_secondary": "#252220",
    "background_tertiary": "#2E2A27",

    # Borders
    "border_light": "#3A3532",
    "border_medium": "#4A4440",

    # Accent
    "accent": "#E07058",
    "accent_hover": "#E88A74",
    "accent_pressed": "#CC5A47",
    "accent_muted": "#4A4440",

    # Status
    "error": "#E07058",

    # Grid
    "weekday_header": "#2E2A27",
    "cell_background": "#252220",
    "cell_hover": "#2E2A27",
    "cell_blank": "#1E1B18",
    "today_outline": "#E07058",
    "event_chip": "#4A2C25",
    "event_chip_text": "#F5F2EC",

    # Surfaces
    "surface_elevated": "#2E2A27",
}
