"""Dark/light preference state machine."""

import logging
from typing import Callable, Optional

from deskcalendar.config.constants import PREFERENCE_FALSE, PREFERENCE_KEY, PREFERENCE_TRUE
from deskcalendar.exceptions.errors import PreferenceStorageError

logger = logging.getLogger(__name__)


def parse_preference(value: Optional[str]) -> Optional[bool]:
    """Decode a persisted flag; an empty value counts as absent, anything but 'true' is light."""
    if not value or not value.strip():
        return None
    return value.strip().lower() == PREFERENCE_TRUE


def serialize_preference(is_dark: bool) -> str:
    return PREFERENCE_TRUE if is_dark else PREFERENCE_FALSE


class PreferenceController:
    """Owns the ``is_dark`` flag and the presentation side channel.

    ``apply`` is the only path to global presentation state, and only this
    controller calls it.

    Args:
        storage: Key-value store with ``load(key)`` and ``save(key, value)``.
        system_prefers_dark: Callable reporting the OS-level dark-mode setting.
        apply: Callable that applies the flag to the presentation layer.
    """

    def __init__(
        self,
        storage,
        system_prefers_dark: Callable[[], bool] = lambda: False,
        apply: Callable[[bool], None] = lambda is_dark: None,
        key: str = PREFERENCE_KEY,
    ):
        self._storage = storage
        self._system_prefers_dark = system_prefers_dark
        self._apply = apply
        self._key = key
        self._is_dark = False
        self._initialized = False

    @property
    def is_dark(self) -> bool:
        return self._is_dark

    @property
    def theme(self) -> str:
        return "dark" if self._is_dark else "light"

    def _read_persisted(self) -> Optional[bool]:
        try:
            raw = self._storage.load(self._key)
        except PreferenceStorageError as e:
            logger.warning("Could not read display preference: %s", e)
            return None
        return parse_preference(raw)

    def _read_system(self) -> bool:
        try:
            return bool(self._system_prefers_dark())
        except Exception as e:
            logger.warning("System color scheme unavailable, using light: %s", e)
            return False

    def initialize(self) -> bool:
        """Resolve the starting state from storage or the system signal.

        Returns:
            True if dark mode is active.
        """
        if self._initialized:
            logger.debug("Preference already initialized (%s)", self.theme)
            return self._is_dark

        persisted = self._read_persisted()
        if persisted is None:
            self._is_dark = self._read_system()
            source = "system"
        else:
            self._is_dark = persisted
            source = "stored"

        self._initialized = True
        self._apply(self._is_dark)
        logger.info("Display preference initialized to %s (%s)", self.theme, source)
        return self._is_dark

    def toggle(self) -> bool:
        """Flip the flag, apply it and persist it.

        Returns:
            True if dark mode is now active.
        """
        self._is_dark = not self._is_dark
        self._initialized = True
        self._apply(self._is_dark)
        try:
            self._storage.save(self._key, serialize_preference(self._is_dark))
        except PreferenceStorageError as e:
            logger.warning("Could not persist display preference: %s", e)
        logger.info("Display preference toggled to %s", self.theme)
        return self._is_dark
