from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..engine.cells import stringify
from ..engine.projector import Projection
from ..engine.rules import resolve_highlight
from ..models.rule import Rule
from ..models.screen import ScreenConfig
from .base import CARD_CAP, EMPTY_MESSAGE, cap_rows, highlight_style, truncate, truncation_notice

"""Cards renderer.

One card per projected row (cap 50):
- title:       config.card_title_column, else the first visible column
- description: config.card_description_column, else the second visible column
- badges:      the remaining visible columns, first 4 of them, null cells
               skipped, values cut to 30 chars and colorized by highlight rules

Validation is not surfaced on cards.
"""

__all__ = [
    "MAX_BADGES",
    "BADGE_VALUE_LIMIT",
    "Badge",
    "Card",
    "CardsView",
    "card_columns",
    "render_cards",
]

MAX_BADGES = 4
BADGE_VALUE_LIMIT = 30


@dataclass(frozen=True)
class Badge:
    column: str
    text: str
    highlight: str | None = None

    @property
    def label(self) -> str:
        return f"{self.column}: {self.text}"

    @property
    def style(self) -> dict[str, str] | None:
        return highlight_style(self.highlight)


@dataclass(frozen=True)
class Card:
    index: int
    title: str
    description: str | None = None
    badges: list[Badge] = field(default_factory=list)


@dataclass(frozen=True)
class CardsView:
    title_column: str | None
    description_column: str | None
    cards: list[Card] = field(default_factory=list)
    total: int = 0
    notice: str | None = None

    @property
    def shown(self) -> int:
        return len(self.cards)

    @property
    def empty_message(self) -> str | None:
        return EMPTY_MESSAGE if self.total == 0 else None


def _truthy(value: Any) -> bool:
    # "", 0, False, NaN, None は説明文として表示しない
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0 and not math.isnan(value)
    return True


def card_columns(visible_columns: Sequence[str], config: ScreenConfig | None) -> tuple[str | None, str | None, list[str]]:
    """Pick (title column, description column, badge columns) for a screen."""
    config = config or ScreenConfig()
    title_col = config.card_title_column or (visible_columns[0] if visible_columns else None)
    desc_col = config.card_description_column or (visible_columns[1] if len(visible_columns) > 1 else None)
    rest = [c for c in visible_columns if c != title_col and c != desc_col]
    return title_col, desc_col, rest[:MAX_BADGES]


def render_cards(projection: Projection, rules: Sequence[Rule], config: ScreenConfig | None = None) -> CardsView:
    title_col, desc_col, badge_cols = card_columns(projection.visible_columns, config)
    cards: list[Card] = []
    for idx, row in enumerate(cap_rows(projection.rows, CARD_CAP), start=1):
        title_value = row.get(title_col) if title_col else None
        title = stringify(title_value) if title_value is not None else f"Row {idx}"

        description = None
        if desc_col:
            desc_value = row.get(desc_col)
            if _truthy(desc_value):
                description = stringify(desc_value)

        badges = []
        for col in badge_cols:
            value = row.get(col)
            if value is None:
                continue
            badges.append(
                Badge(
                    column=col,
                    text=truncate(stringify(value), BADGE_VALUE_LIMIT),
                    highlight=resolve_highlight(row, col, rules),
                )
            )
        cards.append(Card(index=idx, title=title, description=description, badges=badges))

    return CardsView(
        title_column=title_col,
        description_column=desc_col,
        cards=cards,
        total=projection.total,
        notice=truncation_notice(projection.total, CARD_CAP, "records"),
    )
