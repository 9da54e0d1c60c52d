"""Creating and removing a single symlink."""

from __future__ import annotations

import enum
import os
from pathlib import Path

from dotlinker.ui import UIMode, prompt_user


class LinkAction(enum.Enum):
    """What to do with each entry."""

    LINK = "link"
    UNLINK = "unlink"


def get_link_action(action: bool) -> LinkAction:
    """Return unlink when ``action`` is true, otherwise link."""
    return LinkAction.UNLINK if action else LinkAction.LINK


def _simulate_print(msg: str, simulate: bool) -> None:
    print(f"[SIMULATE] {msg}" if simulate else msg)


def _file_name(path: Path) -> str:
    name = path.name
    return "" if name == ".." else name


def handle_link(
    source: Path,
    target_dir: Path,
    action: LinkAction,
    simulate: bool,
    ui_mode: UIMode,
) -> None:
    """Link ``source`` into ``target_dir``, or remove that link again."""
    source = Path(source)
    target_dir = Path(target_dir)
    name = _file_name(source)
    if not name:
        print(f"skipping '{source}'  filename not found")
        return
    target_path = target_dir / name

    if action is LinkAction.LINK:
        if target_path.exists():
            print(f"'{name}' already exists in {target_dir.name}, skipping.")
            return
        if prompt_user(f"link {name}", ui_mode):
            _simulate_print(f"linking '{name}' -> '{target_path}'", simulate)
            if not simulate:
                os.symlink(source, target_path)
        else:
            print(f"skipping '{source}'  user skipped")
        return

    if not target_path.exists():
        print(f"'{name}' doesn't exists, skipping.")
        return
    if target_path.is_symlink():
        if prompt_user(f"unlink {name}", ui_mode):
            _simulate_print(f"unlinking '{name}' <- '{target_path}'", simulate)
            if not simulate:
                target_path.unlink()
        else:
            print(f"skipping '{source}'  user skipped")
    else:
        print(f"target '{target_path}' is not a symlink, skipping.")