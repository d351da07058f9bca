"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG007: str = "CFG007"  # value out of range

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "cache_dirs",
        "keep_installed",
        "keep_uninstalled",
        "batch_size",
        "oracle_command",
        "installed_command",
        "privilege_command",
        "pager",
    }
)

NON_NEGATIVE_INT_KEYS: tuple[str, ...] = ("keep_installed", "keep_uninstalled")
POSITIVE_INT_KEYS: tuple[str, ...] = ("batch_size",)
LIST_OF_STRINGS_KEYS: tuple[str, ...] = ("cache_dirs", "oracle_command", "installed_command", "privilege_command")
NULLABLE_LIST_OF_STRINGS_KEYS: tuple[str, ...] = ("pager",)
COMMAND_KEYS: tuple[str, ...] = ("oracle_command", "installed_command", "pager")
