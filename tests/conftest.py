"""Shared pytest fixtures for cache-directory test data."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest


class RecordingRemover:
    """Batch remover double that unlinks files and records every call."""

    def __init__(self, fail_privileged: bool = False) -> None:
        self.calls: list[tuple[tuple[str, ...], bool]] = []
        self._fail_privileged = fail_privileged

    def __call__(self, paths: Sequence[str], *, privileged: bool) -> bool:
        self.calls.append((tuple(paths), privileged))
        if privileged and self._fail_privileged:
            return False
        for path in paths:
            Path(path).unlink(missing_ok=True)
        return True


def lexical_oracle(paths: Sequence[str]) -> list[str]:
    """Order paths by plain string comparison; fixtures use names where that is version order."""
    return sorted(paths)


@pytest.fixture
def make_cache(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that fills a cache directory with archive files."""

    def _make(names: Sequence[str], *, dirname: str = "pkg", size: int = 10) -> Path:
        directory = tmp_path / dirname
        directory.mkdir(parents=True, exist_ok=True)
        for name in names:
            (directory / name).write_bytes(b"x" * size)
        return directory

    return _make


@pytest.fixture
def remover() -> RecordingRemover:
    return RecordingRemover()
