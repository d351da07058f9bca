"""Package identity resolution: file name parsing and grouping."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pacprune.constants.discovery import ARCH_SEGMENT_PATTERN, MIN_NAME_SEGMENTS
from pacprune.model import PackageFile, PackageGroup

logger = logging.getLogger(__name__)


def parse_package_filename(filename: str) -> tuple[str, str] | None:
    """Split an archive file name into ``(name, "pkgver-pkgrel")``.

    Package names may contain hyphens, so the name is everything except the
    last two segments left after the architecture/extension segment is
    dropped. Returns ``None`` when the name does not follow the convention.

    >>> parse_package_filename("foo-bar-1.2.3-1-x86_64.pkg.tar.zst")
    ('foo-bar', '1.2.3-1')
    """
    match = ARCH_SEGMENT_PATTERN.match(filename)
    if match is None:
        return None
    parts = match.group(1).split("-")
    if len(parts) < MIN_NAME_SEGMENTS or not all(parts):
        return None
    return "-".join(parts[:-2]), "-".join(parts[-2:])


def group_package_files(
    files: Iterable[PackageFile],
    installed_names: frozenset[str] | set[str],
    *,
    warnings: list[str],
) -> dict[str, PackageGroup]:
    """Parse each file name and collect the files into per-package groups.

    Unparsable files are reported and left out of every group, so they are
    never considered for deletion. The installed flag is resolved once, when
    a group is created.
    """
    groups: dict[str, PackageGroup] = {}
    for package_file in files:
        parsed = parse_package_filename(package_file.filename)
        if parsed is None:
            warning = f"Could not parse package file name: {package_file.filename!r}"
            warnings.append(warning)
            logger.warning(warning)
            continue

        package_file.name, package_file.version = parsed
        group = groups.get(package_file.name)
        if group is None:
            group = PackageGroup(name=package_file.name, installed=package_file.name in installed_names)
            groups[package_file.name] = group
        group.members.append(package_file)

    return groups
