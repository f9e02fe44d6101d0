"""Operating-system dark mode signal."""

import logging

logger = logging.getLogger(__name__)


def system_prefers_dark() -> bool:
    """Report whether the desktop asks for a dark color scheme.

    Requires a running QGuiApplication. Qt older than 6.5 has no
    color scheme hint, in which case light is assumed.
    """
    from PyQt6.QtCore import Qt
    from PyQt6.QtGui import QGuiApplication

    if QGuiApplication.instance() is None:
        return False

    hints = QGuiApplication.styleHints()
    color_scheme = getattr(hints, "colorScheme", None)
    if color_scheme is None:
        logger.debug("Qt color scheme hint unavailable")
        return False
    return color_scheme() == Qt.ColorScheme.Dark
