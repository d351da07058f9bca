"""External collaborators: command runner, prompt, and display sink."""

from __future__ import annotations

from .commands import BatchRemover, CommandResult, query_installed_packages, run_command
from .display import display_text
from .prompt import ask_continue

__all__ = [
    "BatchRemover",
    "CommandResult",
    "ask_continue",
    "display_text",
    "query_installed_packages",
    "run_command",
]
