# dotlinker

Symlink your dotfiles. `dot-linker` goes through the entries of a directory,
such as your dotfiles checkout. For each entry it creates a symbolic link in a
target directory, or removes that link again. It skips anything on an ignore
list.

## Installation

```
pip install .
```

The package needs nothing beyond the standard library. It runs on POSIX
systems, where symbolic links can be created.

## Usage

```
dot-linker [DIR] [options]
```

`DIR` is the directory to link from. When it is left out, the current
directory is used. The link is made to the entry's path exactly as it is
formed from `DIR`, so give `DIR` as an absolute path if the links are to point
the right way.

Links go into the target directory. It defaults to `$XDG_CONFIG_HOME`, or to
`$HOME/.config` when that variable is unset.

Options:

- `-t, --target DIR` – the directory to create links in. It must exist and be a directory.
- `-f, --files FILE...` – handle only these entries of `DIR`.
- `-i, --ignore IGNORE...` – extra entries of `DIR` to ignore.
- `-n, --no-symlink` – simulate. The planned actions are printed with a `[SIMULATE]` tag, and nothing is changed.
- `-v, --visual` – ask `(y/n)` before each link or unlink. An empty answer counts as yes.
- `--verbose` – print the chosen target and source directories.
- `-u, --unset` – remove the links instead of creating them.
- `-c, --config PATH` – the ignore file to use, relative to the current directory.
- `-V, --version` – print the version.

Behaviour worth knowing:

- An entry that already exists in the target is never overwritten.
- Unlinking removes only entries that are symbolic links. Other entries are skipped with a message.
- If an error occurs, such as a missing directory, a missing ignore file or a bad pattern, the command prints `Error: ...` to standard error and exits with status 1.

### Examples

Preview linking the current directory into the config directory:

```
dot-linker --no-symlink
```

Link only two entries into a chosen target:

```
dot-linker ~/dotfiles -t ~/.config -f nvim kitty
```

Remove the links again, confirming each one:

```
dot-linker ~/dotfiles -u -v
```

## The ignore file

When `--config` is not given, the ignore file is looked up in two places, in
this order:

1. `dotlinker/dotignore` in the config directory
2. `dotlinker/dotignore` in `DIR`

If neither exists, a default file is written into the config directory:

```
# This file is used to ignore files when symlinking
.git*
README.md
LICENSE
```

The file is read as follows:

- Blank lines and lines starting with `#` are skipped.
- A trailing `/` is stripped. Failing that, a leading `/` is stripped.
- An entry without `*`, `?`, `[` or `]` names one exact entry of `DIR`.
- Any other entry is a case-sensitive glob pattern, matched against file names.
- A pattern with a `**` that is not a whole path component is rejected, and so is a pattern with an unclosed `[`.

Entries named with `--files` are treated differently when they are on the
ignore list. For each one you are asked whether it should be skipped, even
without `--visual`.

## Library use

The modules can also be used directly:

- `dotlinker.ignore.IgnoreList` holds the ignore list. Use `load_from_file`, `add_literals` and `is_ignored`.
- `dotlinker.link.handle_link` links or unlinks one entry. Choose the action with `LinkAction.LINK` or `LinkAction.UNLINK`.
- `dotlinker.ui.UIMode` controls prompting. `SILENT` answers yes to every prompt, and `INTERACTIVE` asks on the console.
- `dotlinker.config.get_config_path` and `determine_config_file` locate the config directory and the ignore file.
- `dotlinker.cli.main(argv=None)` runs the command and returns its exit status.

```python
from pathlib import Path

from dotlinker.ignore import IgnoreList
from dotlinker.link import LinkAction, handle_link
from dotlinker.ui import UIMode

source_dir = Path("/home/me/dotfiles")
ignore = IgnoreList()
ignore.add_literals(["README.md"], source_dir)
entry = source_dir / "nvim"
if not ignore.is_ignored(entry):
    handle_link(entry, Path("/home/me/.config"), LinkAction.LINK, True, UIMode.SILENT)
```

Passing `True` as `simulate` only prints the planned action.