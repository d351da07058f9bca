"""Plain-text report of a deletion plan, shown before confirmation."""

from __future__ import annotations

from pacprune.constants.discovery import SIGNATURE_SUFFIX
from pacprune.constants.reporting import REPORT_LINE_PREFIX
from pacprune.model import DeletionPlan, MarkSummary


def render_plan_report(
    *,
    total_packages: int,
    total_files: int,
    summary: MarkSummary,
    plan: DeletionPlan,
) -> str:
    """Render the pre-deletion report.

    Only base archives are itemized; swept signature siblings count towards
    the size total.
    """
    p = REPORT_LINE_PREFIX
    lines = [
        f"{p}Total {total_packages} packages from {total_files} files.",
        f"{p}Marked {summary.marked_installed} installed package files for delete.",
        f"{p}Marked {summary.marked_uninstalled} uninstalled package files for delete.",
    ]
    lines.extend(
        f'{p}Marked: "{path}"' for path in plan.base_paths if not path.name.endswith(SIGNATURE_SUFFIX)
    )
    lines.append(f"{p}Total {plan.total_megabytes:3.1f} MB ({plan.total_bytes} bytes) marked for delete.")
    return "\n".join(lines)
