"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal

type PromptReply = Literal["affirm", "decline"]
type CommandArgs = tuple[str, ...]

type InstalledQuery = Callable[[], frozenset[str]]
type RemoveBatch = Callable[..., bool]
