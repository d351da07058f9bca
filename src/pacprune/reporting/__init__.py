"""Reporting helpers for pacprune output."""

from __future__ import annotations

from .plan import render_plan_report

__all__ = ["render_plan_report"]
