"""Two-tier retention marking over package groups."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pacprune.model import MarkSummary, PackageFile, PackageGroup, RetentionPolicy

logger = logging.getLogger(__name__)


def select_for_deletion(members: Sequence[PackageFile], keep: int) -> list[PackageFile]:
    """Return the members beyond the *keep* newest, ordered newest first.

    Members without a sequence index are never selected. Nothing is selected
    unless more than *keep* indexed members exist.
    """
    if keep < 0:
        raise ValueError(f"keep must be non-negative, got {keep}")
    ordered = [member for member in members if member.index is not None]
    if len(ordered) < keep:
        return []
    ordered.sort(key=lambda member: member.index or 0, reverse=True)
    return ordered[keep:]


def mark_groups(groups: Iterable[PackageGroup], *, keep: int, installed: bool) -> int:
    """Mark surplus files in every group whose installed flag equals *installed*."""
    marked = 0
    for group in groups:
        if group.installed is not installed:
            continue
        for member in select_for_deletion(group.members, keep):
            member.marked = True
            marked += 1
    logger.debug("Marked %d %s package files (keep=%d)", marked, "installed" if installed else "uninstalled", keep)
    return marked


def apply_retention_policy(groups: Sequence[PackageGroup], policy: RetentionPolicy) -> MarkSummary:
    """Run the uninstalled pass, then the installed pass."""
    marked_uninstalled = mark_groups(groups, keep=policy.keep_for(installed=False), installed=False)
    marked_installed = mark_groups(groups, keep=policy.keep_for(installed=True), installed=True)
    return MarkSummary(marked_installed=marked_installed, marked_uninstalled=marked_uninstalled)
