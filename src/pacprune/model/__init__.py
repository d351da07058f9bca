"""Core data models for pacprune."""

from .entities import (
    CleanResult,
    DeletionPlan,
    MarkSummary,
    PackageFile,
    PackageGroup,
    RemovalOutcome,
    RetentionPolicy,
)

__all__ = [
    "CleanResult",
    "DeletionPlan",
    "MarkSummary",
    "PackageFile",
    "PackageGroup",
    "RemovalOutcome",
    "RetentionPolicy",
]
