"""Root of the pacprune exception hierarchy."""

from __future__ import annotations


class PacpruneError(Exception):
    """Base class for all errors raised by pacprune."""
