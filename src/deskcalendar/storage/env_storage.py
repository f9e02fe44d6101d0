"""Environment file storage for the display preference."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values, set_key

from deskcalendar.config.settings import STORAGE_CONFIG
from deskcalendar.exceptions.errors import PreferenceStorageError

logger = logging.getLogger(__name__)


def get_user_config_dir() -> Path:
    """Return a per-user config directory that works across platforms.

    Returns:
        Path to the user's config directory for this application.
    """
    override = os.environ.get(STORAGE_CONFIG.config_dir_env_var)
    if override:
        return Path(override)

    if sys.platform.startswith("win"):
        base_str = os.environ.get("APPDATA") or os.environ.get("LOCALAPPDATA")
        base = Path(base_str) if base_str else (Path.home() / "AppData" / "Roaming")
        return base / STORAGE_CONFIG.app_dir_name

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / STORAGE_CONFIG.app_dir_name

    # Linux and other Unix-like systems
    base_str = os.environ.get("XDG_CONFIG_HOME")
    base = Path(base_str) if base_str else (Path.home() / ".config")
    return base / STORAGE_CONFIG.app_dir_name


def get_env_file_path() -> Path:
    """Get managed .env path under the user config directory."""
    return get_user_config_dir() / STORAGE_CONFIG.env_file_name


def harden_file_permissions(path: Path) -> None:
    """Best-effort: restrict permissions to the current user on POSIX.

    Args:
        path: Path to the file to secure.
    """
    if os.name != "posix":
        return
    try:
        path.chmod(0o600)
    except OSError as e:
        logger.warning("Could not tighten permissions on %s: %s", path, e)


def harden_directory_permissions(path: Path) -> None:
    """Best-effort: restrict directory permissions to the current user on POSIX.

    Args:
        path: Path to the directory to secure.
    """
    if os.name != "posix":
        return
    try:
        path.chmod(0o700)
    except OSError as e:
        logger.warning("Could not tighten permissions on %s: %s", path, e)


class EnvPreferenceStorage:
    """Key-value preference storage backed by a dotenv file.

    Args:
        path: File to use; defaults to the per-user config ``.env``.
    """

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path is not None else get_env_file_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self, key: str) -> Optional[str]:
        """Read a value without touching ``os.environ``.

        Returns:
            The stored string, or None if the file or key is absent.

        Raises:
            PreferenceStorageError: If the file exists but cannot be read.
        """
        if not self._path.exists():
            return None
        try:
            values = dotenv_values(self._path)
        except (OSError, UnicodeDecodeError) as e:
            raise PreferenceStorageError(str(e), self._path) from e
        value = values.get(key)
        if value is None:
            return None
        return str(value).strip().strip("'\"").strip()

    def save(self, key: str, value: str) -> None:
        """Write a value, creating the file with user-only permissions.

        Raises:
            PreferenceStorageError: If the directory or file cannot be written.
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True, mode=0o700)
            harden_directory_permissions(self._path.parent)

            if not self._path.exists():
                try:
                    fd = os.open(str(self._path), os.O_CREAT | os.O_WRONLY | os.O_EXCL, 0o600)
                    os.close(fd)
                except FileExistsError:
                    pass
            harden_file_permissions(self._path)

            set_key(str(self._path), key, value, quote_mode="never")
            harden_file_permissions(self._path)
        except (OSError, UnicodeDecodeError) as e:
            raise PreferenceStorageError(str(e), self._path) from e
