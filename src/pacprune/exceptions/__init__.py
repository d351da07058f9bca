"""Shared exception hierarchy for pacprune."""

from __future__ import annotations

from .base import PacpruneError
from .commands import CommandError, InstalledQueryError, VersionOracleError
from .config import ConfigError

__all__ = [
    "CommandError",
    "ConfigError",
    "InstalledQueryError",
    "PacpruneError",
    "VersionOracleError",
]
