"""Configuration loading and validation for pacprune.

This package facade re-exports the public names so callers can use
``from pacprune.config import ...``.
"""

from __future__ import annotations

from pacprune.config.loader import default_config_path, load_config
from pacprune.config.model import PacpruneConfig
from pacprune.config.validator import validate_config_file

__all__ = [
    "PacpruneConfig",
    "default_config_path",
    "load_config",
    "validate_config_file",
]
