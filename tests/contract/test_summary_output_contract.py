from __future__ import annotations

import re
from pathlib import Path

from sheetlens.cli import main as cli_main

"""SUMMARY 行フォーマット契約テスト."""

SCREEN_SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+screen=(\S+)\s+type=(table|cards|list)\s+rows=([0-9]+)\s+"
    r"shown=([0-9]+)\s+active_rules=([0-9]+)$"
)

EXPORT_SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+screens=([0-9]+)\s+success=([0-9]+)\s+failed=([0-9]+)\s+"
    r"rows=([0-9]+)\s+elapsed_sec=([0-9]+\.?[0-9]*)$"
)


def _summary_lines(out: str) -> list[str]:
    return [line for line in out.splitlines() if line.startswith("SUMMARY")]


def test_screen_summary_pattern_example_line():
    assert SCREEN_SUMMARY_PATTERN.match("SUMMARY screen=3 type=cards rows=120 shown=50 active_rules=2")


def test_export_summary_pattern_example_line():
    assert EXPORT_SUMMARY_PATTERN.match("SUMMARY screens=3 success=2 failed=1 rows=6 elapsed_sec=0.012")


def test_cli_screen_emits_single_summary_line(write_workspace: Path, capsys):
    cli_main(["--screen", "101"])
    lines = _summary_lines(capsys.readouterr().out)
    assert len(lines) == 1
    m = SCREEN_SUMMARY_PATTERN.match(lines[0])
    assert m
    assert m.group(2) == "cards"
    assert m.group(3) == "3"


def test_cli_export_emits_single_summary_line(write_workspace: Path, capsys):
    cli_main(["--export", "1"])
    lines = _summary_lines(capsys.readouterr().out)
    assert len(lines) == 1
    m = EXPORT_SUMMARY_PATTERN.match(lines[0])
    assert m
    success, failed = int(m.group(2)), int(m.group(3))
    assert int(m.group(1)) == success + failed == 3
