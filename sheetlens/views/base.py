from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

"""Shared truncation and styling contract for the screen renderers.

Renderers only limit what they emit; the projection (and the sheet behind it)
keeps every row, and the true total is reported whenever the cap cuts rows.
"""

__all__ = [
    "TABLE_ROW_CAP",
    "CARD_CAP",
    "LIST_ROW_CAP",
    "EMPTY_MESSAGE",
    "cap_rows",
    "truncation_notice",
    "truncate",
    "highlight_style",
]

TABLE_ROW_CAP = 200
CARD_CAP = 50
LIST_ROW_CAP = 100

EMPTY_MESSAGE = "No matching rows"

# ハイライト色に付与する背景アルファ (16進 2桁)
BACKGROUND_ALPHA = "20"

T = TypeVar("T")


def cap_rows(rows: Sequence[T], cap: int) -> list[T]:
    return list(rows[:cap])


def truncation_notice(total: int, cap: int, noun: str = "rows") -> str | None:
    """'Showing first {cap} of {total} {noun}' when total exceeds cap, else None."""
    if total <= cap:
        return None
    return f"Showing first {cap} of {total} {noun}"


def truncate(text: str, limit: int) -> str:
    return text[:limit]


def highlight_style(color: str | None, background: bool = True) -> dict[str, str] | None:
    """Inline style for a highlighted value.

    Table cells and card badges get a translucent background plus colored
    text; list values only get colored text.
    """
    if not color:
        return None
    if background:
        return {"backgroundColor": color + BACKGROUND_ALPHA, "color": color}
    return {"color": color}
