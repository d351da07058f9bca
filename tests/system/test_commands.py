"""Tests for the external command wrappers."""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from pacprune.exceptions import CommandError, InstalledQueryError
from pacprune.system.commands import BatchRemover, CommandResult, query_installed_packages, run_command


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=(), returncode=returncode, stdout=stdout, stderr=stderr)


def test_run_command_captures_output() -> None:
    with patch("pacprune.system.commands.subprocess.run", return_value=_completed(stdout="out\n")) as run:
        result = run_command(["pacsort", "--files"], input_text="a\n")

    assert result.ok
    assert result.stdout == "out\n"
    assert run.call_args.args[0] == ("pacsort", "--files")
    assert run.call_args.kwargs["input"] == "a\n"
    assert run.call_args.kwargs["errors"] == "surrogateescape"


def test_run_command_wraps_missing_executable() -> None:
    with patch("pacprune.system.commands.subprocess.run", side_effect=FileNotFoundError(2, "No such file")):
        with pytest.raises(CommandError, match="pacsort"):
            run_command(["pacsort"])


def test_run_command_wraps_unencodable_input() -> None:
    error = UnicodeEncodeError("utf-8", "\udcff", 0, 1, "surrogates not allowed")

    with patch("pacprune.system.commands.subprocess.run", side_effect=error):
        with pytest.raises(CommandError, match="pacsort"):
            run_command(["pacsort", "--files"], input_text="/a/foo\udcff.pkg.tar.zst\n")


def test_query_installed_packages_parses_names() -> None:
    result = CommandResult(argv=("pacman", "-Qq"), returncode=0, stdout="vim\nfoo-bar\n\n", stderr="")

    with patch("pacprune.system.commands.run_command", return_value=result):
        assert query_installed_packages() == frozenset({"vim", "foo-bar"})


def test_query_installed_packages_fails_loudly() -> None:
    result = CommandResult(argv=("pacman", "-Qq"), returncode=1, stdout="", stderr="database locked")

    with patch("pacprune.system.commands.run_command", return_value=result):
        with pytest.raises(InstalledQueryError, match="database locked"):
            query_installed_packages()


def test_batch_remover_builds_privileged_argv() -> None:
    remover = BatchRemover(("sudo",))

    assert remover.build_argv(["/a", "/b"], privileged=True) == ("sudo", "rm", "-f", "--", "/a", "/b")
    assert remover.build_argv(["/a"], privileged=False) == ("rm", "-f", "--", "/a")


def test_batch_remover_reports_failure() -> None:
    failed = CommandResult(argv=("rm",), returncode=1, stdout="", stderr="Permission denied")

    with patch("pacprune.system.commands.run_command", return_value=failed):
        assert BatchRemover()(["/a"], privileged=False) is False


def test_batch_remover_rejects_empty_batch() -> None:
    with pytest.raises(ValueError):
        BatchRemover()([], privileged=False)


def test_batch_remover_without_privilege_command_skips_protected_paths() -> None:
    with patch("pacprune.system.commands.run_command") as run:
        assert BatchRemover(())(["/var/cache/pacman/pkg/a"], privileged=True) is False
    run.assert_not_called()
