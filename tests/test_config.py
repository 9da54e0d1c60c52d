import pytest

from dotlinker.config import (
    CONFIG_DIRECTORY,
    CONFIG_FILE,
    DEFAULT_IGNORE_CONTENTS,
    ConfigError,
    determine_config_file,
    get_config_path,
)


def test_config_path_from_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    assert get_config_path() == tmp_path / "xdg"


def test_config_path_from_home(monkeypatch, tmp_path):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_config_path() == tmp_path / ".config"


def test_config_path_without_home(monkeypatch):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(ConfigError):
        get_config_path()


def _make_ignore(directory):
    path = directory / CONFIG_DIRECTORY / CONFIG_FILE
    path.parent.mkdir(parents=True)
    path.write_text("vimrc\n")
    return path


def test_explicit_config_is_relative_to_current_dir(tmp_path):
    result = determine_config_file("custom", tmp_path / "cwd", tmp_path / "b", tmp_path / "c")
    assert result == tmp_path / "cwd" / "custom"
    assert not (tmp_path / "c").exists()


def test_config_dir_file_preferred(tmp_path):
    config_dir = tmp_path / "config"
    base_dir = tmp_path / "base"
    expected = _make_ignore(config_dir)
    _make_ignore(base_dir)
    assert determine_config_file(None, tmp_path, base_dir, config_dir) == expected


def test_base_dir_file_used_when_config_missing(tmp_path):
    config_dir = tmp_path / "config"
    base_dir = tmp_path / "base"
    expected = _make_ignore(base_dir)
    assert determine_config_file(None, tmp_path, base_dir, config_dir) == expected
    assert not config_dir.exists()


def test_default_file_created(tmp_path):
    config_dir = tmp_path / "config"
    result = determine_config_file(None, tmp_path, tmp_path / "base", config_dir)
    assert result == config_dir / CONFIG_DIRECTORY / CONFIG_FILE
    assert result.read_text() == DEFAULT_IGNORE_CONTENTS


def test_existing_file_not_overwritten(tmp_path):
    config_dir = tmp_path / "config"
    path = _make_ignore(config_dir)
    determine_config_file(None, tmp_path, tmp_path / "base", config_dir)
    assert path.read_text() == "vimrc\n"