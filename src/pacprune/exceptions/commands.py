"""Exceptions raised by external command collaborators."""

from __future__ import annotations

from pacprune.exceptions.base import PacpruneError


class CommandError(PacpruneError):
    """Raised when an external command cannot be run or exits with failure."""


class VersionOracleError(CommandError):
    """Raised when the version-ordering tool fails for a directory."""


class InstalledQueryError(CommandError):
    """Raised when the installed-package database cannot be queried."""
