"""Display sink that pages long text through ``less`` on a terminal."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from collections.abc import Sequence

from pacprune.constants.config import DEFAULT_PAGER_COMMAND

logger = logging.getLogger(__name__)


def display_text(text: str, *, pager: Sequence[str] | None = DEFAULT_PAGER_COMMAND) -> None:
    """Show *text* to the operator, paging when stdout is a terminal."""
    if not text.endswith("\n"):
        text = f"{text}\n"
    if pager and sys.stdout.isatty() and shutil.which(pager[0]):
        try:
            subprocess.run(tuple(pager), input=text, text=True, check=False)
            return
        except OSError as exc:
            logger.debug("Pager %s failed, printing instead: %s", pager[0], exc)
    sys.stdout.write(text)
    sys.stdout.flush()
