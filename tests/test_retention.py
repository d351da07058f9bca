"""Tests for the two-tier retention marking."""

from __future__ import annotations

from pathlib import Path

import pytest

from pacprune.engine.retention import apply_retention_policy, mark_groups, select_for_deletion
from pacprune.exceptions import ConfigError
from pacprune.model import PackageFile, PackageGroup, RetentionPolicy


def _member(name: str, index: int | None) -> PackageFile:
    return PackageFile(path=Path("/cache") / name, directory=Path("/cache"), filename=name, index=index)


def _group(name: str, count: int, *, installed: bool, start: int = 0) -> PackageGroup:
    members = [_member(f"{name}-1.{n}-1-any.pkg.tar.zst", start + n) for n in range(count)]
    return PackageGroup(name=name, installed=installed, members=members)


@pytest.mark.parametrize("count", [0, 1, 2])
def test_select_for_deletion_never_marks_at_or_below_keep(count: int) -> None:
    members = [_member(f"m{n}", n) for n in range(count)]

    assert select_for_deletion(members, keep=2) == []


def test_select_for_deletion_returns_oldest_beyond_keep() -> None:
    members = [_member("b", 5), _member("a", 1), _member("d", 9), _member("c", 3)]

    selected = select_for_deletion(members, keep=2)

    assert [member.filename for member in selected] == ["c", "a"]


def test_select_for_deletion_keep_zero_selects_everything() -> None:
    members = [_member("a", 0), _member("b", 1)]

    assert len(select_for_deletion(members, keep=0)) == 2


def test_select_for_deletion_ignores_unindexed_members() -> None:
    members = [_member("a", None), _member("b", 0), _member("c", 1)]

    selected = select_for_deletion(members, keep=1)

    assert [member.filename for member in selected] == ["b"]


def test_select_for_deletion_is_stable_for_equal_indexes() -> None:
    members = [_member("first", 1), _member("second", 1), _member("newest", 2)]

    selected = select_for_deletion(members, keep=1)

    assert [member.filename for member in selected] == ["first", "second"]


def test_select_for_deletion_rejects_negative_keep() -> None:
    with pytest.raises(ValueError, match="keep"):
        select_for_deletion([], keep=-1)


def test_mark_groups_only_visits_matching_state() -> None:
    installed = _group("vim", 3, installed=True)
    removed = _group("foo", 3, installed=False, start=10)

    marked = mark_groups([installed, removed], keep=1, installed=False)

    assert marked == 2
    assert not any(member.marked for member in installed.members)
    assert [member.marked for member in removed.members] == [True, True, False]


def test_apply_retention_policy_counts_each_pass() -> None:
    groups = [
        _group("vim", 5, installed=True),
        _group("foo", 2, installed=False, start=10),
        _group("bar", 1, installed=False, start=20),
    ]

    summary = apply_retention_policy(groups, RetentionPolicy(keep_installed=2, keep_uninstalled=0))

    assert summary.marked_installed == 3
    assert summary.marked_uninstalled == 3
    assert summary.total == 6


def test_apply_retention_policy_passes_are_disjoint_and_exhaustive() -> None:
    groups = [_group(f"pkg{n}", 3, installed=bool(n % 2), start=n * 10) for n in range(6)]

    summary = apply_retention_policy(groups, RetentionPolicy(keep_installed=0, keep_uninstalled=0))

    assert summary.total == sum(len(group.members) for group in groups)
    assert all(member.marked for group in groups for member in group.members)


@pytest.mark.parametrize(
    ("keep_installed", "keep_uninstalled"),
    [(-1, 0), (0, -2), (True, 0)],
    ids=["negative-installed", "negative-uninstalled", "bool"],
)
def test_retention_policy_rejects_invalid_counts(keep_installed: int, keep_uninstalled: int) -> None:
    with pytest.raises(ConfigError):
        RetentionPolicy(keep_installed=keep_installed, keep_uninstalled=keep_uninstalled)
