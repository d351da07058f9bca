"""End-to-end cache cleaning pipeline.

Stages run strictly in order: discovery, version ordering, identity
resolution, retention marking, deletion execution. Each stage hands its
output to the next as an explicit value; the only persistent side effect is
the final batched removal.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from pathlib import Path

from pacprune.constants.config import DEFAULT_BATCH_SIZE
from pacprune.constants.reporting import CONFIRM_OPTIONS, CONFIRM_PROMPT
from pacprune.engine.deletion import build_deletion_plan, execute_deletion
from pacprune.engine.discovery import discover_package_files
from pacprune.engine.identity import group_package_files
from pacprune.engine.ordering import PacsortOracle, VersionOracle, assign_sequence_indexes
from pacprune.engine.retention import apply_retention_policy
from pacprune.model import CleanResult, RemovalOutcome, RetentionPolicy
from pacprune.reporting import render_plan_report
from pacprune.system import BatchRemover, ask_continue, display_text, query_installed_packages
from pacprune.types import InstalledQuery, PromptReply, RemoveBatch

logger = logging.getLogger(__name__)


def clean_package_caches(
    *,
    cache_dirs: Iterable[Path],
    policy: RetentionPolicy,
    oracle: VersionOracle | None = None,
    installed_query: InstalledQuery = query_installed_packages,
    display: Callable[[str], None] = display_text,
    confirm: Callable[[str, str], PromptReply] = ask_continue,
    remover: RemoveBatch | None = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
    dry_run: bool = False,
) -> CleanResult:
    """Prune cached package archives according to *policy*.

    When nothing is marked the run ends without a report or prompt. With
    ``dry_run`` the report is shown but nothing is removed.
    """
    started_at = time.perf_counter()
    warnings: list[str] = []
    oracle = oracle if oracle is not None else PacsortOracle()
    remover = remover if remover is not None else BatchRemover()

    files_by_dir = discover_package_files(cache_dirs, warnings=warnings)
    all_files = [package_file for files in files_by_dir.values() for package_file in files]
    logger.info("Found %d package files in %d cache directories", len(all_files), len(files_by_dir))

    assign_sequence_indexes(files_by_dir, oracle, warnings=warnings)

    installed_names = installed_query() if all_files else frozenset()
    groups = group_package_files(all_files, installed_names, warnings=warnings)

    summary = apply_retention_policy(list(groups.values()), policy)
    plan = build_deletion_plan(all_files, warnings=warnings)

    def _result(*, confirmed: bool = False, outcome: RemovalOutcome | None = None) -> CleanResult:
        return CleanResult(
            total_packages=len(groups),
            total_files=len(all_files),
            summary=summary,
            plan=plan,
            confirmed=confirmed,
            outcome=outcome,
            warnings=tuple(warnings),
            duration_seconds=time.perf_counter() - started_at,
        )

    if plan.is_empty:
        logger.info("Nothing to delete: %d packages within retention limits", len(groups))
        return _result()

    display(render_plan_report(total_packages=len(groups), total_files=len(all_files), summary=summary, plan=plan))
    if dry_run:
        logger.info("Dry run: %d package files left in place", len(plan.base_paths))
        return _result()

    if confirm(CONFIRM_PROMPT, CONFIRM_OPTIONS) != "affirm":
        logger.info("Deletion declined; no files removed")
        return _result()

    outcome = execute_deletion(plan, remover, batch_size=batch_size)
    logger.info(
        "Removed %d path(s) in %d batch(es); %d batch(es) failed",
        len(outcome.removed_paths),
        outcome.removed_batches,
        outcome.failed_batches,
    )
    return _result(confirmed=True, outcome=outcome)
