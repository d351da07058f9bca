"""Thin wrappers around the external tools pacprune shells out to."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from pacprune.constants.config import DEFAULT_INSTALLED_COMMAND, DEFAULT_PRIVILEGE_COMMAND, REMOVE_COMMAND
from pacprune.exceptions import CommandError, InstalledQueryError
from pacprune.types import CommandArgs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one external command."""

    argv: CommandArgs
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(argv: Sequence[str], *, input_text: str | None = None) -> CommandResult:
    """Run *argv* to completion and capture its text output.

    Blocks without a timeout. Text is exchanged with ``surrogateescape`` so
    undecodable file names round-trip. Raises :class:`CommandError` when the
    executable cannot be started or the text cannot be encoded; a non-zero
    exit is reported via the result.
    """
    args = tuple(argv)
    logger.debug("Running: %s", " ".join(args))
    try:
        completed = subprocess.run(
            args,
            input=input_text,
            capture_output=True,
            text=True,
            errors="surrogateescape",
            check=False,
        )
    except OSError as exc:
        raise CommandError(f"Cannot run {args[0]!r}: {exc}") from exc
    except UnicodeError as exc:
        raise CommandError(f"Cannot exchange text with {args[0]!r}: {exc}") from exc
    return CommandResult(
        argv=args,
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )


def query_installed_packages(command: Sequence[str] = DEFAULT_INSTALLED_COMMAND) -> frozenset[str]:
    """Return the names of all packages in the local package database."""
    try:
        result = run_command(command)
    except CommandError as exc:
        raise InstalledQueryError(str(exc)) from exc
    if not result.ok:
        raise InstalledQueryError(
            f"{' '.join(result.argv)} exited with status {result.returncode}: {result.stderr.strip()}"
        )
    return frozenset(line.strip() for line in result.stdout.splitlines() if line.strip())


class BatchRemover:
    """Removes one bounded batch of paths, optionally through a privilege helper."""

    def __init__(self, privilege_command: Sequence[str] = DEFAULT_PRIVILEGE_COMMAND) -> None:
        self._privilege_command = tuple(privilege_command)

    def build_argv(self, paths: Sequence[str], *, privileged: bool) -> tuple[str, ...]:
        """Return the argv that removes *paths*."""
        prefix = self._privilege_command if privileged else ()
        return (*prefix, *REMOVE_COMMAND, *paths)

    def __call__(self, paths: Sequence[str], *, privileged: bool) -> bool:
        if not paths:
            raise ValueError("Refusing to run a removal command without paths")
        if privileged and not self._privilege_command:
            logger.warning("No privilege command configured; skipping %d protected path(s)", len(paths))
            return False
        try:
            result = run_command(self.build_argv(paths, privileged=privileged))
        except CommandError as exc:
            logger.error("Removal failed: %s", exc)
            return False
        if not result.ok:
            logger.error(
                "Removal of %d path(s) exited with status %d: %s",
                len(paths),
                result.returncode,
                result.stderr.strip(),
            )
            return False
        return True
