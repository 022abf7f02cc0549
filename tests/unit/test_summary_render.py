from __future__ import annotations

from datetime import UTC, datetime

from sheetlens.engine.projector import project
from sheetlens.models import ExportResult, Screen, ScreenStat, ScreenType, Sheet
from sheetlens.services.screen_service import ScreenRender
from sheetlens.services.summary import format_seconds, render_export_summary, render_screen_summary
from sheetlens.views.table import render_table


def test_format_seconds():
    assert format_seconds(0) == "0"
    assert format_seconds(2.0) == "2"
    assert format_seconds(1.23456) == "1.235"
    assert format_seconds(0.000123) == "0.000123"


def test_render_screen_summary():
    sheet = Sheet(id=1, project_id=1, name="S", columns=["A"], data=[{"A": i} for i in range(250)])
    projection = project(sheet)
    render = ScreenRender(
        screen=Screen(id=7, project_id=1, sheet_id=1, name="T", type=ScreenType.TABLE),
        sheet_name="S",
        projection=projection,
        view=render_table(projection, []),
        active_rule_names=["a", "b"],
    )
    assert render_screen_summary(render) == "SUMMARY screen=7 type=table rows=250 shown=200 active_rules=2"


def test_render_export_summary():
    now = datetime.now(UTC)
    result = ExportResult(
        success_screens=2,
        failed_screens=1,
        total_rows=42,
        start_time=now,
        end_time=now,
        elapsed_seconds=1.5,
        screen_stats=[ScreenStat(screen_id=1, screen_name="x", status="success", rows=42, shown=42)],
    )
    assert render_export_summary(result) == "SUMMARY screens=3 success=2 failed=1 rows=42 elapsed_sec=1.5"
