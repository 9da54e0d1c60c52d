"""Ignore list built from literal paths and glob patterns."""

from __future__ import annotations

import fnmatch
from collections.abc import Iterable
from pathlib import Path

_WILDCARDS = frozenset("*?[]")


class PatternError(ValueError):
    """A glob pattern in the ignore file is malformed."""


def _is_literal_pattern(pattern: str) -> bool:
    return not any(ch in _WILDCARDS for ch in pattern)


def _validate_pattern(pattern: str) -> None:
    n = len(pattern)
    i = 0
    while i < n:
        ch = pattern[i]
        if ch == "*":
            j = i
            while j < n and pattern[j] == "*":
                j += 1
            run = j - i
            whole_component = (i == 0 or pattern[i - 1] == "/") and (
                j == n or pattern[j] == "/"
            )
            if run > 2 or (run == 2 and not whole_component):
                raise PatternError(
                    f"invalid pattern '{pattern}': wildcards are either regular '*' "
                    "or recursive '**'"
                )
            i = j
        elif ch == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            # the first character of a set may itself be ']'
            close = pattern.find("]", j + 1) if j < n else -1
            if close == -1:
                raise PatternError(f"invalid pattern '{pattern}': invalid range pattern")
            i = close + 1
        else:
            i += 1


def _file_name(path: Path) -> str:
    name = path.name
    return "" if name == ".." else name


class IgnoreList:
    """Paths and file-name patterns to leave alone."""

    def __init__(self) -> None:
        self.literals: set[Path] = set()
        self.patterns: list[str] = []

    def load_from_file(self, file_path: Path, base_dir: Path) -> None:
        """Read entries from an ignore file; literals are taken relative to ``base_dir``."""
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"config file '{file_path}' does not exist")
        contents = file_path.read_text(encoding="utf-8")
        for raw in contents.split("\n"):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            if line.endswith("/"):
                line = line[:-1]
            elif line.startswith("/"):
                line = line[1:]
            if _is_literal_pattern(line):
                self.literals.add(Path(base_dir) / line)
            else:
                _validate_pattern(line)
                self.patterns.append(line)

    def add_literals(self, paths: Iterable[str] | None, base_dir: Path) -> None:
        """Add paths relative to ``base_dir``; ``None`` adds nothing."""
        if paths is None:
            return
        self.literals.update(Path(base_dir) / p for p in paths)

    def is_ignored(self, path: Path) -> bool:
        """Whether ``path`` is a listed literal or its file name matches a pattern."""
        path = Path(path)
        if path in self.literals:
            return True
        name = _file_name(path)
        return any(fnmatch.fnmatchcase(name, pattern) for pattern in self.patterns)