from __future__ import annotations

from ..models.export_result import ExportResult
from .screen_service import ScreenRender

"""SUMMARY line rendering.

Formats:
    SUMMARY screen={id} type={type} rows={rows} shown={shown} active_rules={n}
    SUMMARY screens={total} success={ok} failed={ng} rows={rows} elapsed_sec={sec}

The "SUMMARY " prefix is part of the returned string; callers logging through
log_summary() strip it (the formatter adds the label).
"""

__all__ = [
    "format_seconds",
    "render_screen_summary",
    "render_export_summary",
]


def format_seconds(seconds: float) -> str:
    """Integer seconds without a fraction, tiny values without exponent."""
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return str(round(seconds, 3))


def render_screen_summary(render: ScreenRender) -> str:
    return (
        f"SUMMARY screen={render.screen.id} "
        f"type={render.screen_type.value} "
        f"rows={render.row_count} "
        f"shown={render.view.shown} "
        f"active_rules={len(render.active_rule_names)}"
    )


def render_export_summary(result: ExportResult) -> str:
    return (
        f"SUMMARY screens={result.total_screens} "
        f"success={result.success_screens} "
        f"failed={result.failed_screens} "
        f"rows={result.total_rows} "
        f"elapsed_sec={format_seconds(result.elapsed_seconds)}"
    )
