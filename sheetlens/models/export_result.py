from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

"""Result models for exporting a project's screens.

ExportResult aggregates what the SUMMARY line reports; ScreenStat is the
per-screen detail.
"""

__all__ = [
    "ScreenStat",
    "ExportResult",
]


@dataclass(frozen=True)
class ScreenStat:
    screen_id: object
    screen_name: str
    status: str  # success / failed
    rows: int  # フィルタ後の総行数 (キャップ前)
    shown: int  # 描画された行数 (キャップ後)
    output_file: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class ExportResult:
    success_screens: int
    failed_screens: int
    total_rows: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    screen_stats: list[ScreenStat] = field(default_factory=list)

    @property
    def total_screens(self) -> int:
        return self.success_screens + self.failed_screens
