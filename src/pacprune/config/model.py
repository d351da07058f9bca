"""Config data model for cache cleaning."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pacprune.constants.config import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CACHE_DIRS,
    DEFAULT_INSTALLED_COMMAND,
    DEFAULT_KEEP_INSTALLED,
    DEFAULT_KEEP_UNINSTALLED,
    DEFAULT_ORACLE_COMMAND,
    DEFAULT_PAGER_COMMAND,
    DEFAULT_PRIVILEGE_COMMAND,
)
from pacprune.model import RetentionPolicy
from pacprune.types import CommandArgs


@dataclass(frozen=True)
class PacpruneConfig:
    """Resolved cache-cleaning config."""

    cache_dirs: tuple[str, ...] = DEFAULT_CACHE_DIRS
    keep_installed: int = DEFAULT_KEEP_INSTALLED
    keep_uninstalled: int = DEFAULT_KEEP_UNINSTALLED
    batch_size: int = DEFAULT_BATCH_SIZE
    oracle_command: CommandArgs = DEFAULT_ORACLE_COMMAND
    installed_command: CommandArgs = DEFAULT_INSTALLED_COMMAND
    privilege_command: CommandArgs = DEFAULT_PRIVILEGE_COMMAND
    pager: CommandArgs | None = DEFAULT_PAGER_COMMAND

    @property
    def policy(self) -> RetentionPolicy:
        """Retention policy built from the keep-counts."""
        return RetentionPolicy(
            keep_installed=self.keep_installed,
            keep_uninstalled=self.keep_uninstalled,
        )

    @property
    def cache_paths(self) -> tuple[Path, ...]:
        """Cache directories with ``~`` expanded, in configured order."""
        return tuple(Path(raw).expanduser() for raw in self.cache_dirs)
