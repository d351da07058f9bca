"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "PACPRUNE"
CLI_DESCRIPTION: str = "\n".join(
    (
        f">_ {BRAND_NAME}",
        "     // version-aware package cache retention",
        "",
        "Keeps the newest package archives per package and removes the rest.",
    )
)
