"""Dict-backed preference storage for tests and headless runs."""

from typing import Dict, Optional


class MemoryPreferenceStorage:
    """Keeps values for the lifetime of the process only."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})
        self.writes = 0

    def load(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def save(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes += 1
