"""Deletion planning and privilege-split batched removal."""

from __future__ import annotations

import glob
import itertools
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from pacprune.constants.config import DEFAULT_BATCH_SIZE
from pacprune.engine.discovery import is_package_file_name
from pacprune.model import DeletionPlan, PackageFile, RemovalOutcome
from pacprune.types import RemoveBatch

logger = logging.getLogger(__name__)


def expand_siblings(path: Path) -> list[Path]:
    """Return *path* plus every entry sharing it as an exact prefix.

    This sweeps in detached signatures (``<archive>.sig``). Entries that are
    package archives themselves are excluded; they get their own retention
    decision.
    """
    pattern = glob.escape(str(path)) + "*"
    siblings = [Path(match) for match in sorted(glob.glob(pattern))]
    return [sibling for sibling in siblings if sibling == path or not is_package_file_name(sibling.name)]


def build_deletion_plan(files: Iterable[PackageFile], *, warnings: list[str]) -> DeletionPlan:
    """Collect marked files, their siblings, and the total size on disk."""
    base_paths: list[Path] = []
    sizes: dict[Path, int] = {}

    for package_file in files:
        if not package_file.marked:
            continue
        for path in dict.fromkeys([package_file.path, *expand_siblings(package_file.path)]):
            if path in sizes:
                continue
            try:
                sizes[path] = path.lstat().st_size
            except OSError as exc:
                warning = f"Cannot stat {path}, leaving it out of the deletion plan: {exc.strerror or exc}"
                warnings.append(warning)
                logger.warning(warning)
                continue
            if path == package_file.path:
                base_paths.append(path)

    return DeletionPlan(
        base_paths=tuple(base_paths),
        paths=tuple(sizes),
        total_bytes=sum(sizes.values()),
    )


def can_remove_directly(path: Path) -> bool:
    """Return True when the current user may unlink *path* without elevation."""
    return os.access(path, os.W_OK) and os.access(path.parent, os.W_OK | os.X_OK)


def partition_by_privilege(paths: Iterable[Path]) -> tuple[list[Path], list[Path]]:
    """Split *paths* into ``(direct, privileged)`` removal lists."""
    direct: list[Path] = []
    privileged: list[Path] = []
    for path in paths:
        (direct if can_remove_directly(path) else privileged).append(path)
    return direct, privileged


def execute_deletion(
    plan: DeletionPlan,
    remover: RemoveBatch,
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> RemovalOutcome:
    """Remove every planned path in bounded batches, privileged ones first.

    A failing batch is logged and counted; the remaining batches still run
    and earlier batches are not rolled back.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    direct, privileged = partition_by_privilege(plan.paths)

    removed_batches = 0
    failed_batches = 0
    removed_paths: list[Path] = []
    for paths, elevated in ((privileged, True), (direct, False)):
        for batch in itertools.batched(paths, batch_size):
            if remover([str(path) for path in batch], privileged=elevated):
                removed_batches += 1
                removed_paths.extend(batch)
            else:
                failed_batches += 1
                logger.error("Failed to remove batch of %d path(s) starting at %s", len(batch), batch[0])

    return RemovalOutcome(
        removed_batches=removed_batches,
        failed_batches=failed_batches,
        removed_paths=tuple(removed_paths),
    )
