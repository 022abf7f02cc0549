from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

"""Screen model: a saved view configuration over exactly one Sheet.

Screen configs are persisted as loose camelCase dicts
(visibleColumns / sortColumn / sortDirection / cardTitleColumn /
cardDescriptionColumn). ScreenConfig.from_dict() reads that bag and keeps only
the recognized fields; unknown keys are ignored.
"""

__all__ = [
    "ScreenType",
    "SortDirection",
    "ScreenConfig",
    "Screen",
]


class ScreenType(Enum):
    """Renderer variant selected by a Screen."""
    TABLE = "table"
    CARDS = "cards"
    LIST = "list"


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"

    def invert(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC

    @classmethod
    def parse(cls, value: Any) -> SortDirection:
        # 不明値は asc 扱い
        if isinstance(value, SortDirection):
            return value
        if isinstance(value, str) and value.lower() == "desc":
            return cls.DESC
        return cls.ASC


@dataclass(frozen=True)
class ScreenConfig:
    visible_columns: list[str] = field(default_factory=list)
    sort_column: str | None = None
    sort_direction: SortDirection = SortDirection.ASC
    card_title_column: str | None = None
    card_description_column: str | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any] | None) -> ScreenConfig:
        if not d:
            return cls()
        visible = d.get("visibleColumns") or []
        return cls(
            visible_columns=[str(c) for c in visible],
            sort_column=d.get("sortColumn") or None,
            sort_direction=SortDirection.parse(d.get("sortDirection")),
            card_title_column=d.get("cardTitleColumn") or None,
            card_description_column=d.get("cardDescriptionColumn") or None,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.visible_columns:
            out["visibleColumns"] = list(self.visible_columns)
        if self.sort_column:
            out["sortColumn"] = self.sort_column
            out["sortDirection"] = self.sort_direction.value
        if self.card_title_column:
            out["cardTitleColumn"] = self.card_title_column
        if self.card_description_column:
            out["cardDescriptionColumn"] = self.card_description_column
        return out


@dataclass(frozen=True)
class Screen:
    id: Any
    project_id: Any
    sheet_id: Any
    name: str
    type: ScreenType
    config: ScreenConfig = field(default_factory=ScreenConfig)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Screen:
        return cls(
            id=d["id"],
            project_id=d.get("projectId"),
            sheet_id=d["sheetId"],
            name=d.get("name", ""),
            type=ScreenType(d.get("type", "table")),
            config=ScreenConfig.from_dict(d.get("config")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "projectId": self.project_id,
            "sheetId": self.sheet_id,
            "name": self.name,
            "type": self.type.value,
            "config": self.config.to_dict(),
        }
