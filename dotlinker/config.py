"""Location of the configuration directory and the ignore file."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_DIRECTORY = "dotlinker"
CONFIG_FILE = "dotignore"
DEFAULT_IGNORE_CONTENTS = (
    "# This file is used to ignore files when symlinking\n.git*\nREADME.md\nLICENSE"
)


class ConfigError(Exception):
    """The configuration location cannot be worked out."""


def get_config_path() -> Path:
    """Return ``$XDG_CONFIG_HOME``, or ``$HOME/.config`` when it is unset."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg is not None:
        return Path(xdg)
    home = os.environ.get("HOME")
    if home is None:
        raise ConfigError("environment variable HOME is not set")
    return Path(home) / ".config"


def _ignore_file(directory: Path) -> Path:
    return Path(directory) / CONFIG_DIRECTORY / CONFIG_FILE


def _create_default_ignore_file(config_dir: Path) -> None:
    dotlinker_dir = Path(config_dir) / CONFIG_DIRECTORY
    dotlinker_dir.mkdir(parents=True, exist_ok=True)
    (dotlinker_dir / CONFIG_FILE).write_text(DEFAULT_IGNORE_CONTENTS, encoding="utf-8")


def determine_config_file(
    config: str | None, curr_dir: Path, base_dir: Path, config_dir: Path
) -> Path:
    """Pick the ignore file to use.

    An explicit ``config`` is taken relative to ``curr_dir``. Otherwise the
    file in ``config_dir`` wins over the one in ``base_dir``; when neither
    exists a default one is written into ``config_dir``.
    """
    if config is not None:
        return Path(curr_dir) / config
    if _ignore_file(config_dir).exists():
        return _ignore_file(config_dir)
    if _ignore_file(base_dir).exists():
        return _ignore_file(base_dir)
    _create_default_ignore_file(config_dir)
    return _ignore_file(config_dir)