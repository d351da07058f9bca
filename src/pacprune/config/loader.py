"""Config loading and normalization."""

from __future__ import annotations

import difflib
import os
from pathlib import Path
from typing import Any

import yaml

from pacprune.config.model import PacpruneConfig
from pacprune.constants.config import CONFIG_DIRNAME, CONFIG_FILENAME
from pacprune.constants.validation import ALLOWED_CONFIG_KEYS
from pacprune.exceptions import ConfigError


def default_config_path() -> Path:
    """Return ``$XDG_CONFIG_HOME/pacprune/pacprune.yaml`` (``~/.config`` fallback)."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / CONFIG_DIRNAME / CONFIG_FILENAME


def load_config(config_path: Path | None = None) -> PacpruneConfig:
    """Load and validate config from an explicit path or the default location.

    A missing default file yields built-in defaults; a missing explicit file is
    an error.
    """
    path = config_path.expanduser().resolve() if config_path else default_config_path()
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return PacpruneConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        described = []
        for key in unknown:
            hint = suggest_key(key, ALLOWED_CONFIG_KEYS)
            described.append(f"{key} ({hint})" if hint else key)
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(described)}")

    defaults = PacpruneConfig()
    pager_raw = raw.get("pager", list(defaults.pager or ()))
    pager = None if pager_raw is None else _ensure_command(pager_raw, "pager")

    return PacpruneConfig(
        cache_dirs=tuple(_ensure_string_list(raw.get("cache_dirs", list(defaults.cache_dirs)), "cache_dirs")),
        keep_installed=_ensure_int(raw.get("keep_installed", defaults.keep_installed), "keep_installed", minimum=0),
        keep_uninstalled=_ensure_int(
            raw.get("keep_uninstalled", defaults.keep_uninstalled), "keep_uninstalled", minimum=0
        ),
        batch_size=_ensure_int(raw.get("batch_size", defaults.batch_size), "batch_size", minimum=1),
        oracle_command=_ensure_command(raw.get("oracle_command", list(defaults.oracle_command)), "oracle_command"),
        installed_command=_ensure_command(
            raw.get("installed_command", list(defaults.installed_command)), "installed_command"
        ),
        privilege_command=tuple(
            _ensure_string_list(raw.get("privilege_command", list(defaults.privilege_command)), "privilege_command")
        ),
        pager=pager,
    )


def suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _ensure_command(value: Any, key_name: str) -> tuple[str, ...]:
    """Validate an argv-style command list; it must name an executable."""
    argv = _ensure_string_list(value, key_name)
    if not argv or not argv[0].strip():
        raise ConfigError(f"{key_name} must be a non-empty list of strings")
    return tuple(argv)


def _ensure_int(value: Any, key_name: str, *, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        qualifier = "non-negative" if minimum == 0 else "positive"
        raise ConfigError(f"{key_name} must be a {qualifier} integer")
    return value
