"""Style manager for centralized widget styling."""

from typing import Callable, Dict, Tuple

from PyQt6.QtWidgets import QWidget


class StyleManager:
    """Keeps widget stylesheets in step with the active theme.

    Widgets are registered with a generator that reads the current palette,
    so a theme change only needs ``refresh_all()``.

    Example:
        style_manager = StyleManager()
        style_manager.register("new_event_button", button, ButtonStyles.accent)

        # On theme change:
        style_manager.refresh_all()
    """

    def __init__(self):
        self._widgets: Dict[str, Tuple[QWidget, Callable[[], str]]] = {}

    def register(self, name: str, widget: QWidget, style_fn: Callable[[], str]) -> None:
        """Register a widget with its style generator and apply it.

        Args:
            name: Unique name for the widget.
            widget: The QWidget to style.
            style_fn: A callable that returns the stylesheet string.
        """
        self._widgets[name] = (widget, style_fn)
        self._apply(name)

    def _apply(self, name: str) -> None:
        if name in self._widgets:
            widget, style_fn = self._widgets[name]
            widget.setStyleSheet(style_fn())

    def refresh_all(self) -> None:
        """Refresh all registered widget styles."""
        for name in self._widgets:
            self._apply(name)
