"""Constants for the deletion plan report."""

from __future__ import annotations

BYTES_PER_MEGABYTE: float = 1e6
REPORT_LINE_PREFIX: str = "+ "
DONE_MESSAGE: str = "+ Done."
CONFIRM_PROMPT: str = "Are you sure?"
CONFIRM_OPTIONS: str = "Ynq"
