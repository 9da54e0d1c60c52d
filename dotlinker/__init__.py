"""Symlink dotfiles from a directory into a target directory, honouring an ignore file."""

__version__ = "1.0.0"
__all__ = ["cli", "config", "ignore", "link", "ui"]