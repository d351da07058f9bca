"""Single-question confirmation prompt shared by interactive commands."""

from __future__ import annotations

import sys
from collections.abc import Callable

from pacprune.types import PromptReply


def _read_stdin() -> str:
    return sys.stdin.readline()


def _write_stderr(text: str) -> None:
    sys.stderr.write(text)
    sys.stderr.flush()


def ask_continue(
    prompt: str = "Continue?",
    options: str = "Ynq",
    *,
    read: Callable[[], str] = _read_stdin,
    write: Callable[[str], None] = _write_stderr,
) -> PromptReply:
    """Ask *prompt* until the operator answers with one of *options*.

    The single uppercase letter in *options* is the default on Enter. A
    ``q`` answer exits the whole process via ``SystemExit(0)``; end of input
    counts as ``q`` when offered and as a decline otherwise.
    """
    defaults = [option for option in options if option.isupper()]
    if len(defaults) > 1:
        raise ValueError(f"Only 1 uppercase option is allowed: {options!r}")
    default_reply = defaults[0].lower() if defaults else ""
    allowed = options.lower()

    write("\n")
    while True:
        write(f"{prompt} [{options}] ")
        line = read()
        if line == "":
            reply = "q" if "q" in allowed else "n"
            break
        reply = line.strip().lower() or default_reply
        if len(reply) == 1 and reply in allowed:
            break

    write("\n")
    if reply == "q":
        raise SystemExit(0)
    return "affirm" if reply == "y" else "decline"
