"""Cache retention engine package."""

from __future__ import annotations

from typing import Any

__all__ = ["clean_package_caches"]


def __getattr__(name: str) -> Any:
    """Lazily expose the pipeline entry point to avoid import cycles at package import time."""
    if name == "clean_package_caches":
        from .orchestrator import clean_package_caches

        return clean_package_caches
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
