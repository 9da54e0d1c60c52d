"""Console interaction: verbosity and yes/no prompts."""

from __future__ import annotations

import enum
import sys


class UIMode(enum.Enum):
    """Whether actions ask for confirmation."""

    INTERACTIVE = "interactive"
    SILENT = "silent"


def get_ui_mode(mode: bool) -> UIMode:
    """Return the interactive mode when ``mode`` is true, otherwise silent."""
    return UIMode.INTERACTIVE if mode else UIMode.SILENT


def verbose_print(msg: str, is_verbose: bool) -> None:
    """Print ``msg`` with a verbose tag when verbose output is on."""
    if is_verbose:
        print(f"[VERBOSE] {msg}")


def prompt_user(prompt: str, mode: UIMode) -> bool:
    """Ask a yes/no question; silent mode always answers yes.

    An empty answer counts as yes.
    """
    if mode is UIMode.SILENT:
        return True
    print(f"{prompt} (y/n) ", end="", flush=True)
    answer = sys.stdin.readline()
    return answer.strip().lower() in {"y", "yes", ""}