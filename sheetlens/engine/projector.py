from __future__ import annotations

from dataclasses import dataclass, field

from ..models.screen import ScreenConfig, SortDirection
from ..models.sheet import Row, Sheet
from .cells import sort_key, stringify

"""Screen projector: (sheet, screen config, search, sort) -> projection.

Order of operations:
1. Resolve visible columns (config.visible_columns if non-empty, else the
   sheet's columns in sheet order)
2. Search filter over the visible columns
3. Stable sort of the filtered rows

Every call recomputes from scratch and never mutates the sheet; the returned
rows are the sheet's own row dicts in a new list.
"""

__all__ = [
    "SortState",
    "Projection",
    "resolve_visible_columns",
    "filter_rows",
    "sort_rows",
    "project",
]


@dataclass(frozen=True)
class SortState:
    """Current sort column/direction of a screen view.

    toggle() implements header-click behavior: clicking the current column
    flips its direction, clicking another column sorts it ascending.
    """
    column: str | None = None
    direction: SortDirection = SortDirection.ASC

    def toggle(self, column: str) -> SortState:
        if self.column == column:
            return SortState(column=column, direction=self.direction.invert())
        return SortState(column=column, direction=SortDirection.ASC)

    @classmethod
    def from_config(cls, config: ScreenConfig | None) -> SortState:
        if config is None or not config.sort_column:
            return cls()
        return cls(column=config.sort_column, direction=config.sort_direction)


@dataclass(frozen=True)
class Projection:
    rows: list[Row] = field(default_factory=list)
    visible_columns: list[str] = field(default_factory=list)
    sort: SortState = field(default_factory=SortState)

    @property
    def total(self) -> int:
        """Row count after filtering (before any renderer cap)."""
        return len(self.rows)


def resolve_visible_columns(sheet: Sheet, config: ScreenConfig | None) -> list[str]:
    if config is not None and config.visible_columns:
        return list(config.visible_columns)
    return list(sheet.columns)


def filter_rows(rows: list[Row], columns: list[str], search_query: str) -> list[Row]:
    """Keep rows where any visible cell contains the query (case-insensitive).

    Null/absent cells never match a non-empty query.
    """
    if not search_query:
        return list(rows)
    q = search_query.lower()
    kept: list[Row] = []
    for row in rows:
        for col in columns:
            val = row.get(col)
            if val is not None and q in stringify(val).lower():
                kept.append(row)
                break
    return kept


def sort_rows(rows: list[Row], sort: SortState) -> list[Row]:
    if not sort.column:
        return list(rows)
    column = sort.column
    # sorted() は reverse=True でも同値キーの入力順を保つ
    return sorted(
        rows,
        key=lambda r: sort_key(r.get(column)),
        reverse=sort.direction is SortDirection.DESC,
    )


def project(
    sheet: Sheet | None,
    config: ScreenConfig | None = None,
    search_query: str = "",
    sort: SortState | None = None,
) -> Projection:
    """Compute the filtered, sorted, column-limited row set for a screen.

    A missing sheet (dangling screen reference) yields an empty projection.
    """
    sort = sort or SortState()
    if sheet is None:
        return Projection(rows=[], visible_columns=[], sort=sort)
    columns = resolve_visible_columns(sheet, config)
    rows = filter_rows(sheet.data, columns, search_query or "")
    rows = sort_rows(rows, sort)
    return Projection(rows=rows, visible_columns=columns, sort=sort)
