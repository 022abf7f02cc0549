from __future__ import annotations

from datetime import date, datetime, time
from typing import Any

import numpy as np
import pandas as pd

from ..models.sheet import CellValue, Row, Sheet

"""DataFrame -> Sheet adapter.

The ingestion collaborator hands over one pandas DataFrame per worksheet
(header already applied). This module turns it into the engine's Sheet:

1. Column names are stringified and stripped; blank names become
   "Column N", duplicates get a " (2)", " (3)" ... suffix
2. Rows that are entirely empty are dropped
3. Cells are narrowed to str | int | float | bool | None
   (NaN/NaT -> None, numpy scalars -> Python, timestamps -> ISO text)
4. Optional null sentinels (compared upper-cased, e.g. {"N/A", "NULL"}) -> None
"""

__all__ = [
    "normalize_columns",
    "to_cell",
    "sheet_from_frame",
]


def normalize_columns(raw: list[Any]) -> list[str]:
    columns: list[str] = []
    seen: dict[str, int] = {}
    for i, c in enumerate(raw, start=1):
        name = "" if c is None or (isinstance(c, float) and np.isnan(c)) else str(c).strip()
        if not name or name.startswith("Unnamed:"):
            name = f"Column {i}"
        count = seen.get(name, 0) + 1
        seen[name] = count
        columns.append(name if count == 1 else f"{name} ({count})")
    return columns


def to_cell(value: Any, null_sentinels: set[str] | None = None) -> CellValue:
    """Narrow a raw DataFrame value to a primitive cell value."""
    if value is None:
        return None
    if isinstance(value, np.datetime64):
        value = pd.Timestamp(value)
    if isinstance(value, (datetime, date, time)):
        if pd.isna(value):
            return None
        return value.isoformat()
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and np.isnan(value):
        return None
    if value is pd.NA or value is pd.NaT:
        return None
    if isinstance(value, str):
        if null_sentinels and value.strip().upper() in null_sentinels:
            return None
        return value
    if isinstance(value, (bool, int, float)):
        return value
    # Decimal / Timedelta などはテキスト化
    return str(value)


def sheet_from_frame(
    df: pd.DataFrame,
    sheet_id: Any,
    name: str,
    project_id: Any = None,
    null_sentinels: set[str] | None = None,
) -> Sheet:
    columns = normalize_columns(list(df.columns))
    sentinels = {s.strip().upper() for s in null_sentinels} if null_sentinels else None
    rows: list[Row] = []
    for raw in df.itertuples(index=False, name=None):
        row: Row = {}
        for col, val in zip(columns, raw, strict=False):
            cell = to_cell(val, sentinels)
            if cell is not None:
                row[col] = cell
        # 全セル空の行はスキップ
        if not row:
            continue
        rows.append(row)
    return Sheet(id=sheet_id, project_id=project_id, name=name, columns=columns, data=rows)
