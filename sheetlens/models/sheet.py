from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

"""Sheet / Project models for the sheetlens projection engine.

A Sheet is one imported worksheet: an ordered list of unique column names and
an ordered list of schema-less row records. Rows are plain dicts of primitive
cell values and may be sparse (missing keys read as None).
"""

__all__ = [
    "CellValue",
    "Row",
    "Project",
    "Sheet",
]

CellValue = Union[str, int, float, bool, None]
Row = dict[str, CellValue]


@dataclass(frozen=True)
class Project:
    """Grouping key for sheets and screens."""
    id: Any
    name: str

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Project:
        return cls(id=d["id"], name=d.get("name", ""))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Sheet:
    """One worksheet's columns and rows.

    `columns` is the canonical display order. The engine treats the sheet as
    read-only; projections build new lists and never touch `data`.
    """
    id: Any
    project_id: Any
    name: str
    columns: list[str] = field(default_factory=list)
    data: list[Row] = field(default_factory=list)

    def cell(self, row_index: int, column: str) -> CellValue:
        """Sparse cell access (absent key -> None)."""
        return self.data[row_index].get(column)

    @property
    def row_count(self) -> int:
        return len(self.data)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Sheet:
        return cls(
            id=d["id"],
            project_id=d.get("projectId"),
            name=d.get("name", ""),
            columns=[str(c) for c in d.get("columns", [])],
            data=[dict(r) for r in d.get("data", [])],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "projectId": self.project_id,
            "name": self.name,
            "columns": list(self.columns),
            "data": [dict(r) for r in self.data],
        }
