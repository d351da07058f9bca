"""Tests for the confirmation prompt primitive."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from pacprune.system.prompt import ask_continue


def _reader(*lines: str) -> Callable[[], str]:
    pending = list(lines)
    return lambda: pending.pop(0) if pending else ""


def _ask(*lines: str, options: str = "Ynq") -> tuple[str, list[str]]:
    written: list[str] = []
    reply = ask_continue("Are you sure?", options, read=_reader(*lines), write=written.append)
    return reply, written


@pytest.mark.parametrize(
    ("lines", "options", "expected"),
    [
        (("y\n",), "Ynq", "affirm"),
        (("N\n",), "Ynq", "decline"),
        (("\n",), "Ynq", "affirm"),
        (("\n",), "yNq", "decline"),
        (("maybe\n", "x\n", "n\n"), "Ynq", "decline"),
    ],
    ids=["yes", "no-uppercase", "default-yes", "default-no", "reprompt"],
)
def test_ask_continue_replies(lines: tuple[str, ...], options: str, expected: str) -> None:
    reply, _ = _ask(*lines, options=options)

    assert reply == expected


def test_ask_continue_reprompts_until_valid() -> None:
    _, written = _ask("?\n", "y\n")

    assert sum(1 for text in written if text.startswith("Are you sure? [Ynq]")) == 2


def test_ask_continue_quit_exits_process() -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ask("q\n")

    assert excinfo.value.code == 0


def test_ask_continue_eof_quits_when_offered() -> None:
    with pytest.raises(SystemExit):
        _ask()


def test_ask_continue_eof_declines_without_quit_option() -> None:
    reply, _ = _ask(options="yN")

    assert reply == "decline"


def test_ask_continue_rejects_multiple_defaults() -> None:
    with pytest.raises(ValueError, match="uppercase"):
        _ask("y\n", options="YNq")
