from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..engine.cells import stringify
from ..engine.projector import Projection
from ..engine.rules import resolve_highlight, resolve_validation
from ..models.rule import Rule
from ..models.screen import SortDirection
from .base import EMPTY_MESSAGE, TABLE_ROW_CAP, cap_rows, highlight_style, truncation_notice

"""Table renderer.

Headers are the visible columns (clickable to change sort, see
SortState.toggle). One row per projected row, capped at 200. Each cell carries
its highlight color and, when a validation rule fires, the message shown as
hover text next to a warning indicator.
"""

__all__ = [
    "TableHeader",
    "TableCell",
    "TableRow",
    "TableView",
    "render_table",
]


@dataclass(frozen=True)
class TableHeader:
    column: str
    sort_direction: SortDirection | None = None  # None = 未ソート列


@dataclass(frozen=True)
class TableCell:
    column: str
    value: Any
    text: str
    highlight: str | None = None
    validation: str | None = None

    @property
    def style(self) -> dict[str, str] | None:
        return highlight_style(self.highlight)

    @property
    def invalid(self) -> bool:
        return self.validation is not None


@dataclass(frozen=True)
class TableRow:
    index: int  # 1-based display index
    cells: list[TableCell]


@dataclass(frozen=True)
class TableView:
    headers: list[TableHeader]
    rows: list[TableRow] = field(default_factory=list)
    total: int = 0
    notice: str | None = None

    @property
    def shown(self) -> int:
        return len(self.rows)

    @property
    def empty_message(self) -> str | None:
        return EMPTY_MESSAGE if self.total == 0 else None


def render_table(projection: Projection, rules: Sequence[Rule]) -> TableView:
    sort = projection.sort
    headers = [
        TableHeader(column=col, sort_direction=sort.direction if sort.column == col else None)
        for col in projection.visible_columns
    ]
    rows: list[TableRow] = []
    for idx, row in enumerate(cap_rows(projection.rows, TABLE_ROW_CAP), start=1):
        cells = []
        for col in projection.visible_columns:
            value = row.get(col)
            cells.append(
                TableCell(
                    column=col,
                    value=value,
                    text=stringify(value),
                    highlight=resolve_highlight(row, col, rules),
                    validation=resolve_validation(row, col, rules),
                )
            )
        rows.append(TableRow(index=idx, cells=cells))
    return TableView(
        headers=headers,
        rows=rows,
        total=projection.total,
        notice=truncation_notice(projection.total, TABLE_ROW_CAP, "rows"),
    )
