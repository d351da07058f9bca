"""Shared type aliases for pacprune."""

from .common import CommandArgs, InstalledQuery, PromptReply, RemoveBatch

__all__ = ["CommandArgs", "InstalledQuery", "PromptReply", "RemoveBatch"]
