"""Discovery of cached package archives across cache directories."""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterable
from pathlib import Path

from pacprune.constants.discovery import PACKAGE_FILE_GLOB, SIGNATURE_SUFFIX
from pacprune.model import PackageFile

logger = logging.getLogger(__name__)


def is_package_file_name(name: str) -> bool:
    """Return True for archive names such as ``foo-1.0-1-x86_64.pkg.tar.zst``."""
    return fnmatch.fnmatchcase(name, PACKAGE_FILE_GLOB) and not name.endswith(SIGNATURE_SUFFIX)


def discover_package_files(
    cache_dirs: Iterable[Path],
    *,
    warnings: list[str],
) -> dict[Path, list[PackageFile]]:
    """Find package archives in each cache directory, keyed by resolved directory.

    Directory order is preserved. Detached signatures are left out; they are
    picked up later as deletion siblings of their archive. Missing or
    unreadable directories contribute nothing and produce a warning.
    """
    files_by_dir: dict[Path, list[PackageFile]] = {}
    seen_paths: set[Path] = set()

    for raw_dir in cache_dirs:
        directory = Path(raw_dir).expanduser().resolve()
        if directory in files_by_dir:
            logger.debug("Skipping repeated cache directory: %s", directory)
            continue

        try:
            names = sorted(entry.name for entry in directory.iterdir())
        except OSError as exc:
            warning = f"Skipping cache directory {directory}: {exc.strerror or exc}"
            warnings.append(warning)
            logger.warning(warning)
            continue

        found: list[PackageFile] = []
        for name in names:
            if not is_package_file_name(name):
                continue
            path = directory / name
            if path in seen_paths or not path.is_file():
                continue
            seen_paths.add(path)
            found.append(PackageFile(path=path, directory=directory, filename=name))

        logger.debug("Found %d package files in %s", len(found), directory)
        files_by_dir[directory] = found

    return files_by_dir
