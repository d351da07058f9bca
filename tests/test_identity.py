"""Tests for archive name parsing and package grouping."""

from __future__ import annotations

from pathlib import Path

import pytest

from pacprune.engine.identity import group_package_files, parse_package_filename
from pacprune.model import PackageFile


def _file(name: str, directory: Path = Path("/cache")) -> PackageFile:
    return PackageFile(path=directory / name, directory=directory, filename=name)


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("foo-bar-1.2.3-1-x86_64.pkg.tar.zst", ("foo-bar", "1.2.3-1")),
        ("vim-9.0.1-1-x86_64.pkg.tar.zst", ("vim", "9.0.1-1")),
        ("python-pip-2:24.0-2-any.pkg.tar.xz", ("python-pip", "2:24.0-2")),
        ("lib32-gcc-libs-13.2.1-5-x86_64.pkg.tar", ("lib32-gcc-libs", "13.2.1-5")),
    ],
    ids=["hyphenated-name", "simple", "epoch", "uncompressed"],
)
def test_parse_package_filename(filename: str, expected: tuple[str, str]) -> None:
    assert parse_package_filename(filename) == expected


@pytest.mark.parametrize(
    "filename",
    [
        "foo-1.0-x86_64.pkg.tar.zst",
        "foo.pkg.tar.zst",
        "1.0-x86_64.pkg.tar.zst",
        "foo--1-x86_64.pkg.tar.zst",
    ],
    ids=["two-segments", "no-hyphen", "one-segment", "empty-segment"],
)
def test_parse_package_filename_rejects_short_names(filename: str) -> None:
    assert parse_package_filename(filename) is None


def test_group_package_files_groups_by_name_and_resolves_installed() -> None:
    files = [
        _file("vim-9.0.1-1-x86_64.pkg.tar.zst"),
        _file("foo-bar-1.0-1-any.pkg.tar.zst"),
        _file("vim-9.0.0-2-x86_64.pkg.tar.zst"),
    ]

    warnings: list[str] = []
    groups = group_package_files(files, frozenset({"vim"}), warnings=warnings)

    assert list(groups) == ["vim", "foo-bar"]
    assert [member.version for member in groups["vim"].members] == ["9.0.1-1", "9.0.0-2"]
    assert groups["vim"].installed is True
    assert groups["foo-bar"].installed is False
    assert not warnings


def test_group_package_files_skips_unparsable_with_warning() -> None:
    bad = _file("broken-x86_64.pkg.tar.zst")
    good = _file("foo-1.0-1-x86_64.pkg.tar.zst")

    warnings: list[str] = []
    groups = group_package_files([bad, good], frozenset(), warnings=warnings)

    assert list(groups) == ["foo"]
    assert bad.name is None
    assert bad.version is None
    assert len(warnings) == 1
    assert "broken-x86_64.pkg.tar.zst" in warnings[0]


def test_group_package_files_queries_installed_once_per_group() -> None:
    class CountingSet(frozenset):
        lookups: list[str] = []

        def __contains__(self, item: object) -> bool:
            CountingSet.lookups.append(str(item))
            return super().__contains__(item)

    files = [_file(f"foo-1.{n}-1-x86_64.pkg.tar.zst") for n in range(4)]

    group_package_files(files, CountingSet({"foo"}), warnings=[])

    assert CountingSet.lookups == ["foo"]
