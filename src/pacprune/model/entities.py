"""Entities flowing through the cache retention pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pacprune.constants.reporting import BYTES_PER_MEGABYTE
from pacprune.exceptions import ConfigError


@dataclass
class PackageFile:
    """One cached package archive, identified by its absolute path.

    ``name``/``version`` are filled by identity resolution and ``index`` by
    version ordering. A file whose ``index`` stays ``None`` is never marked.
    """

    path: Path
    directory: Path
    filename: str
    name: str | None = None
    version: str | None = None
    index: int | None = None
    marked: bool = False


@dataclass
class PackageGroup:
    """All cached archives sharing one package name."""

    name: str
    installed: bool
    members: list[PackageFile] = field(default_factory=list)


@dataclass(frozen=True)
class RetentionPolicy:
    """Number of newest archives kept per package, split by installed state."""

    keep_installed: int
    keep_uninstalled: int

    def __post_init__(self) -> None:
        for key in ("keep_installed", "keep_uninstalled"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{key} must be a non-negative integer, got {value!r}")

    def keep_for(self, *, installed: bool) -> int:
        """Return the keep-count that applies to groups in the given state."""
        return self.keep_installed if installed else self.keep_uninstalled


@dataclass(frozen=True)
class MarkSummary:
    """Files marked for deletion by each retention pass."""

    marked_installed: int = 0
    marked_uninstalled: int = 0

    @property
    def total(self) -> int:
        return self.marked_installed + self.marked_uninstalled


@dataclass(frozen=True)
class DeletionPlan:
    """Marked archives expanded with their on-disk siblings."""

    base_paths: tuple[Path, ...] = ()
    paths: tuple[Path, ...] = ()
    total_bytes: int = 0

    @property
    def total_megabytes(self) -> float:
        return self.total_bytes / BYTES_PER_MEGABYTE

    @property
    def is_empty(self) -> bool:
        return not self.base_paths


@dataclass(frozen=True)
class RemovalOutcome:
    """Result of running the batched removal commands."""

    removed_batches: int = 0
    failed_batches: int = 0
    removed_paths: tuple[Path, ...] = ()


@dataclass(frozen=True)
class CleanResult:
    """Full outcome of one cache-cleaning run."""

    total_packages: int
    total_files: int
    summary: MarkSummary
    plan: DeletionPlan
    confirmed: bool = False
    outcome: RemovalOutcome | None = None
    warnings: tuple[str, ...] = ()
    duration_seconds: float = 0.0
