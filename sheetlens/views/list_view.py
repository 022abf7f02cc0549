from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from ..engine.cells import stringify
from ..engine.projector import Projection
from ..engine.rules import resolve_highlight
from ..models.rule import Rule
from .base import EMPTY_MESSAGE, LIST_ROW_CAP, cap_rows, highlight_style, truncate, truncation_notice

"""List renderer: one compact line per record (cap 100).

Every visible column with a non-null value is shown inline as
`column: value`, value cut to 50 chars and colored by highlight rules.
Validation is not surfaced in this variant.
"""

__all__ = [
    "LIST_VALUE_LIMIT",
    "ListField",
    "ListItem",
    "ListView",
    "render_list",
]

LIST_VALUE_LIMIT = 50


@dataclass(frozen=True)
class ListField:
    column: str
    text: str
    highlight: str | None = None

    @property
    def style(self) -> dict[str, str] | None:
        return highlight_style(self.highlight, background=False)


@dataclass(frozen=True)
class ListItem:
    index: int
    fields: list[ListField] = field(default_factory=list)


@dataclass(frozen=True)
class ListView:
    items: list[ListItem] = field(default_factory=list)
    total: int = 0
    notice: str | None = None

    @property
    def shown(self) -> int:
        return len(self.items)

    @property
    def empty_message(self) -> str | None:
        return EMPTY_MESSAGE if self.total == 0 else None


def render_list(projection: Projection, rules: Sequence[Rule]) -> ListView:
    items: list[ListItem] = []
    for idx, row in enumerate(cap_rows(projection.rows, LIST_ROW_CAP), start=1):
        fields = [
            ListField(
                column=col,
                text=truncate(stringify(row[col]), LIST_VALUE_LIMIT),
                highlight=resolve_highlight(row, col, rules),
            )
            for col in projection.visible_columns
            if row.get(col) is not None
        ]
        items.append(ListItem(index=idx, fields=fields))
    return ListView(
        items=items,
        total=projection.total,
        notice=truncation_notice(projection.total, LIST_ROW_CAP, "rows"),
    )
