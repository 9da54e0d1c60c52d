"""Command line: symlink the entries of a dotfiles directory."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from dotlinker.config import ConfigError, determine_config_file, get_config_path
from dotlinker.ignore import IgnoreList, PatternError
from dotlinker.link import get_link_action, handle_link
from dotlinker.ui import UIMode, get_ui_mode, prompt_user, verbose_print

VERSION = "1.0.0"


@dataclass
class Args:
    """Parsed command-line options."""

    target: Path | None = None
    dir: Path | None = None
    files: list[str] | None = None
    ignore: list[str] | None = None
    no_symlink: bool = False
    visual: bool = False
    verbose: bool = False
    unset: bool = False
    config: str | None = None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dot-linker", description="symlink's your dots")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-t", "--target", type=Path, help="The directory to symlink to")
    parser.add_argument(
        "dir", metavar="DIR", nargs="?", type=Path, help="The directory to symlink from"
    )
    parser.add_argument(
        "-f",
        "--files",
        metavar="FILE",
        nargs="+",
        help="The files to symlink, higher precedence than dir",
    )
    parser.add_argument("-i", "--ignore", metavar="IGNORE", nargs="+", help="The files to ignore")
    parser.add_argument(
        "-n", "--no-symlink", action="store_true", help="simulate the symlink, no actual linking"
    )
    parser.add_argument(
        "-v", "--visual", action="store_true", help="asks for confirmation before actions"
    )
    parser.add_argument("--verbose", action="store_true", help="prints verbose output")
    parser.add_argument("-u", "--unset", action="store_true", help="unset symlink")
    parser.add_argument("-c", "--config", help="path to config file")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Args:
    """Parse command-line arguments into :class:`Args`."""
    ns = _build_parser().parse_args(argv)
    return Args(
        target=ns.target,
        dir=ns.dir,
        files=ns.files,
        ignore=ns.ignore,
        no_symlink=ns.no_symlink,
        visual=ns.visual,
        verbose=ns.verbose,
        unset=ns.unset,
        config=ns.config,
    )


def determine_target_directory(
    target: Path | None, config_path: Path, is_verbose: bool
) -> Path:
    """Return the given target directory after checking it, else ``config_path``."""
    if target is None:
        return Path(config_path)
    target = Path(target)
    if not target.exists():
        raise FileNotFoundError(f"target '{target}' does not exist")
    if not target.is_dir():
        raise NotADirectoryError(f"target '{target}' is not a directory")
    verbose_print(f"target directory set to '{target}'", is_verbose)
    return target


def determine_base_dir(base_dir: Path | None, current_dir: Path, is_verbose: bool) -> Path:
    """Return the given source directory after checking it, else ``current_dir``."""
    if base_dir is None:
        return Path(current_dir)
    base_dir = Path(base_dir)
    if not base_dir.exists():
        raise FileNotFoundError(f"base dir '{base_dir}' does not exist")
    if not base_dir.is_dir():
        raise NotADirectoryError(f"base dir '{base_dir}' is not a directory")
    verbose_print(f"base dir set to '{base_dir}'", is_verbose)
    return base_dir


def _run(args: Args) -> None:
    is_verbose = args.verbose
    config_path = get_config_path()
    target_dir = determine_target_directory(args.target, config_path, is_verbose)
    current_dir = Path.cwd()
    base_dir = determine_base_dir(args.dir, current_dir, is_verbose)
    ui_mode = get_ui_mode(args.visual)
    config_file = determine_config_file(args.config, current_dir, base_dir, config_path)

    ignore_list = IgnoreList()
    ignore_list.load_from_file(config_file, base_dir)
    ignore_list.add_literals(args.ignore, base_dir)

    action = get_link_action(args.unset)
    simulate = args.no_symlink

    if args.files is not None:
        for name in args.files:
            path = base_dir / name
            if ignore_list.is_ignored(path) and prompt_user(
                f"'{path.name}' is in ignore list, do you  want to  skip it? ",
                UIMode.INTERACTIVE,
            ):
                print(f"'{path.name}' in ignore list ,skipping")
                continue
            handle_link(path, target_dir, action, simulate, ui_mode)
    else:
        for path in base_dir.iterdir():
            if ignore_list.is_ignored(path):
                print(f"'{path.name}' in ignore list ,skipping")
                continue
            handle_link(path, target_dir, action, simulate, ui_mode)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = parse_args(argv)
    try:
        _run(args)
    except (OSError, ConfigError, PatternError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0