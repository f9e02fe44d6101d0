import os
import stat
import sys
from pathlib import Path

import pytest

from deskcalendar.core.preference import PreferenceController
from deskcalendar.exceptions.errors import PreferenceStorageError
from deskcalendar.storage.env_storage import (
    EnvPreferenceStorage,
    get_env_file_path,
    get_user_config_dir,
)


def test_missing_file_loads_none(tmp_path: Path) -> None:
    storage = EnvPreferenceStorage(tmp_path / "missing" / ".env")
    assert storage.load("darkMode") is None


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "config" / ".env"
    storage = EnvPreferenceStorage(path)

    storage.save("darkMode", "true")

    assert path.exists()
    assert "darkMode=true" in path.read_text()
    assert storage.load("darkMode") == "true"
    assert storage.load("otherKey") is None


def test_save_overwrites_previous_value(tmp_path: Path) -> None:
    storage = EnvPreferenceStorage(tmp_path / ".env")
    storage.save("darkMode", "true")
    storage.save("darkMode", "false")

    assert storage.load("darkMode") == "false"
    assert storage.path.read_text().count("darkMode") == 1


def test_load_strips_quotes(tmp_path: Path) -> None:
    path = tmp_path / ".env"
    path.write_text("darkMode='true'\n")
    assert EnvPreferenceStorage(path).load("darkMode") == "true"


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions only")
def test_save_restricts_permissions(tmp_path: Path) -> None:
    path = tmp_path / "config" / ".env"
    EnvPreferenceStorage(path).save("darkMode", "false")

    assert stat.S_IMODE(path.stat().st_mode) == 0o600
    assert stat.S_IMODE(path.parent.stat().st_mode) == 0o700


def test_unwritable_location_raises_storage_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    storage = EnvPreferenceStorage(blocker / ".env")

    with pytest.raises(PreferenceStorageError) as info:
        storage.save("darkMode", "true")
    assert info.value.path == blocker / ".env"


def test_undecodable_file_raises_storage_error(tmp_path: Path) -> None:
    path = tmp_path / ".env"
    path.write_bytes(b"darkMode=\xff\xfe\n")
    storage = EnvPreferenceStorage(path)

    with pytest.raises(PreferenceStorageError):
        storage.load("darkMode")
    with pytest.raises(PreferenceStorageError):
        storage.save("darkMode", "true")


def test_toggle_survives_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / ".env"
    path.write_bytes(b"darkMode=\xff\xfe\n")
    controller = PreferenceController(EnvPreferenceStorage(path), lambda: True)

    assert controller.initialize() is True
    assert controller.toggle() is False
    assert controller.is_dark is False


def test_config_dir_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DESKCALENDAR_CONFIG_DIR", str(tmp_path))

    assert get_user_config_dir() == tmp_path
    assert get_env_file_path() == tmp_path / ".env"
    assert EnvPreferenceStorage().path == tmp_path / ".env"


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG layout is Linux only")
def test_xdg_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DESKCALENDAR_CONFIG_DIR", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / "DeskCalendar"


def test_preference_survives_restart(tmp_path: Path) -> None:
    path = tmp_path / ".env"

    session_one = PreferenceController(EnvPreferenceStorage(path), lambda: False)
    assert session_one.initialize() is False
    session_one.toggle()

    session_two = PreferenceController(EnvPreferenceStorage(path), lambda: False)
    assert session_two.initialize() is True
