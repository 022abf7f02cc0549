from __future__ import annotations

import logging
import re
import time
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ..models.export_result import ExportResult, ScreenStat
from ..store.memory import InMemoryStore
from ..views.text import render_text
from .progress import ProgressTracker
from .screen_service import ScreenRender, render_screen

"""Project export: render every screen of a project to a text file.

Each screen is written to `<out_dir>/<screen id>-<slug>.txt` with its default
sort (from the screen config) and no search. A write failure marks only that
screen as failed; the remaining screens are still exported.
"""

__all__ = [
    "screen_filename",
    "format_screen_text",
    "export_project",
]

logger = logging.getLogger(__name__)

_SLUG_RE = re.compile(r"[^A-Za-z0-9._-]+")


def screen_filename(screen_id: Any, screen_name: str) -> str:
    slug = _SLUG_RE.sub("-", screen_name).strip("-").lower() or "screen"
    return f"{screen_id}-{slug}.txt"


def format_screen_text(render: ScreenRender) -> str:
    """Header block (name, type, sheet, row count, active rules) + the view."""
    screen = render.screen
    sheet_label = render.sheet_name if render.sheet_name is not None else "(missing sheet)"
    lines = [
        f"{screen.name} [{screen.type.value}]",
        f"{sheet_label} · {render.row_count} rows",
    ]
    if render.active_rule_names:
        lines.append("Active rules: " + ", ".join(render.active_rule_names))
    lines.append("")
    lines.append(render_text(render.view))
    return "\n".join(lines) + "\n"


def export_project(store: InMemoryStore, project_id: Any, out_dir: Path) -> ExportResult:
    screens = store.list_screens(project_id)
    start = datetime.now(UTC)
    t0 = time.perf_counter()
    stats: list[ScreenStat] = []

    out_dir.mkdir(parents=True, exist_ok=True)
    if not screens:
        logger.info(f"project {project_id}: no screens to export")

    with ProgressTracker(len(screens)) as progress:
        for screen in screens:
            progress.start_screen(screen.name)
            render = render_screen(store, screen.id)
            target = out_dir / screen_filename(screen.id, screen.name)
            try:
                target.write_text(format_screen_text(render), encoding="utf-8")
            except OSError as e:
                logger.error(f"export failed screen={screen.id} file={target.name}: {e}")
                stats.append(
                    ScreenStat(
                        screen_id=screen.id,
                        screen_name=screen.name,
                        status="failed",
                        rows=render.row_count,
                        shown=render.view.shown,
                        error=str(e),
                    )
                )
                progress.finish_screen()
                continue
            logger.info(f"exported screen={screen.id} rows={render.row_count} -> {target}")
            stats.append(
                ScreenStat(
                    screen_id=screen.id,
                    screen_name=screen.name,
                    status="success",
                    rows=render.row_count,
                    shown=render.view.shown,
                    output_file=str(target),
                )
            )
            progress.finish_screen(rows=render.row_count)

    elapsed = time.perf_counter() - t0
    ok = [s for s in stats if s.status == "success"]
    return ExportResult(
        success_screens=len(ok),
        failed_screens=len(stats) - len(ok),
        total_rows=sum(s.rows for s in ok),
        start_time=start,
        end_time=datetime.now(UTC),
        elapsed_seconds=elapsed,
        screen_stats=stats,
    )
