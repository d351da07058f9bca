"""Version ordering of cached archives through a pluggable oracle.

Version comparison for ``name-pkgver-pkgrel`` (with optional ``epoch:``) is
left to an external authority such as ``pacsort --files``. Any callable that
maps one directory's candidate paths to the same paths in ascending version
order can stand in for it, which lets other ecosystems reuse the retention
logic unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol

from pacprune.constants.config import DEFAULT_ORACLE_COMMAND
from pacprune.exceptions import CommandError, VersionOracleError
from pacprune.model import PackageFile
from pacprune.system.commands import run_command

logger = logging.getLogger(__name__)


class VersionOracle(Protocol):
    """Orders the archive paths of a single directory, oldest first."""

    def __call__(self, paths: Sequence[str]) -> list[str]: ...


class PacsortOracle:
    """Version oracle backed by ``pacsort --files``."""

    def __init__(self, command: Sequence[str] = DEFAULT_ORACLE_COMMAND) -> None:
        self._command = tuple(command)

    def __call__(self, paths: Sequence[str]) -> list[str]:
        if not paths:
            return []
        # pacsort needs the final line terminated.
        payload = "\n".join(paths) + "\n"
        try:
            result = run_command(self._command, input_text=payload)
        except CommandError as exc:
            raise VersionOracleError(str(exc)) from exc
        if not result.ok:
            raise VersionOracleError(
                f"{' '.join(self._command)} exited with status {result.returncode}: {result.stderr.strip()}"
            )
        return [line for line in result.stdout.splitlines() if line]


def assign_sequence_indexes(
    files_by_dir: Mapping[Path, Sequence[PackageFile]],
    oracle: VersionOracle,
    *,
    warnings: list[str],
) -> int:
    """Give every file a global recency index, one oracle call per directory.

    Indexes increase strictly in directory order and, within a directory, in
    the order the oracle returns paths. Paths the oracle drops, or all paths
    of a directory whose oracle call fails, keep ``index=None``. Returns the
    number of files that received an index.
    """
    next_index = 0
    for directory, files in files_by_dir.items():
        if not files:
            continue
        by_path = {str(package_file.path): package_file for package_file in files}

        try:
            ordered = oracle(list(by_path))
        except VersionOracleError as exc:
            warning = f"Version ordering failed for {directory}; its {len(files)} file(s) will be kept: {exc}"
            warnings.append(warning)
            logger.warning(warning)
            continue

        for raw_path in ordered:
            package_file = by_path.get(raw_path)
            if package_file is None:
                warning = f"Version oracle returned an unexpected path for {directory}: {raw_path!r}"
                warnings.append(warning)
                logger.warning(warning)
                continue
            if package_file.index is not None:
                logger.debug("Ignoring repeated oracle path: %s", raw_path)
                continue
            package_file.index = next_index
            next_index += 1

        for package_file in files:
            if package_file.index is None:
                warning = f"No version order for {package_file.path}; it will be kept"
                warnings.append(warning)
                logger.warning(warning)

    return next_index
