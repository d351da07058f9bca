"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "pacprune.yaml"
CONFIG_DIRNAME: str = "pacprune"

DEFAULT_CACHE_DIRS: tuple[str, ...] = (
    "~/.cache/pikaur/pkg",
    "/var/cache/pacman/pkg",
)
DEFAULT_KEEP_INSTALLED: int = 2
DEFAULT_KEEP_UNINSTALLED: int = 0

# Bounds the argv length handed to rm/sudo.
DEFAULT_BATCH_SIZE: int = 20

DEFAULT_ORACLE_COMMAND: tuple[str, ...] = ("pacsort", "--files")
DEFAULT_INSTALLED_COMMAND: tuple[str, ...] = ("pacman", "-Qq")
DEFAULT_PRIVILEGE_COMMAND: tuple[str, ...] = ("sudo",)
DEFAULT_PAGER_COMMAND: tuple[str, ...] = ("less", "-FIJMRSWX#8", "--status-col-width=1")
REMOVE_COMMAND: tuple[str, ...] = ("rm", "-f", "--")
