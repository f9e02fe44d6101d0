"""Runtime settings for DeskCalendar."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class UIConfig:
    """Window and grid sizing."""

    min_window_size: Tuple[int, int] = (760, 640)
    default_window_size: Tuple[int, int] = (1040, 860)
    day_cell_height: int = 96
    max_chips_per_cell: int = 3
    form_min_width: int = 420


@dataclass(frozen=True)
class StorageConfig:
    """Where the display preference is persisted."""

    app_dir_name: str = "DeskCalendar"
    env_file_name: str = ".env"
    # Overrides the per-user config directory when set
    config_dir_env_var: str = "DESKCALENDAR_CONFIG_DIR"


UI_CONFIG = UIConfig()
STORAGE_CONFIG = StorageConfig()
