"""Display preference storage for DeskCalendar."""

from deskcalendar.storage.env_storage import (
    EnvPreferenceStorage,
    get_user_config_dir,
    get_env_file_path,
)
from deskcalendar.storage.memory_storage import MemoryPreferenceStorage

__all__ = [
    "EnvPreferenceStorage",
    "MemoryPreferenceStorage",
    "get_user_config_dir",
    "get_env_file_path",
]
