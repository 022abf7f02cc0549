from __future__ import annotations

from typing import Union

from ..models.screen import SortDirection
from .cards import CardsView
from .list_view import ListView
from .table import TableView

"""Plain-text rendering of view models (CLI output / exported screens).

Markers:
- `*` after a value: the cell is highlighted (color appended as `*#ef4444`)
- `!` after a value: a validation rule fired; messages are listed under the row
"""

__all__ = [
    "render_text",
]

View = Union[TableView, CardsView, ListView]

_SORT_MARKS = {SortDirection.ASC: " ^", SortDirection.DESC: " v"}
_MAX_CELL_WIDTH = 40


def _mark(text: str, highlight: str | None, invalid: bool = False) -> str:
    if highlight:
        text += f" *{highlight}"
    if invalid:
        text += " !"
    return text


def _table_text(view: TableView) -> list[str]:
    header = ["#"] + [h.column + _SORT_MARKS.get(h.sort_direction, "") for h in view.headers]
    body: list[list[str]] = []
    notes: dict[int, list[str]] = {}
    for row in view.rows:
        line = [str(row.index)]
        for cell in row.cells:
            line.append(_mark(cell.text, cell.highlight, cell.invalid)[:_MAX_CELL_WIDTH])
            if cell.validation:
                notes.setdefault(row.index, []).append(f"{cell.column}: {cell.validation}")
        body.append(line)
    widths = [len(h) for h in header]
    for line in body:
        for i, v in enumerate(line):
            widths[i] = max(widths[i], len(v))
    out = [" | ".join(h.ljust(widths[i]) for i, h in enumerate(header)).rstrip()]
    out.append("-+-".join("-" * w for w in widths))
    for line in body:
        out.append(" | ".join(v.ljust(widths[i]) for i, v in enumerate(line)).rstrip())
        idx = int(line[0])
        for note in notes.get(idx, []):
            out.append(f"    ! {note}")
    return out


def _cards_text(view: CardsView) -> list[str]:
    out: list[str] = []
    for card in view.cards:
        out.append(f"[{card.index}] {card.title}")
        if card.description:
            out.append(f"    {card.description}")
        if card.badges:
            out.append("    " + "  ".join(f"({_mark(b.label, b.highlight)})" for b in card.badges))
    return out


def _list_text(view: ListView) -> list[str]:
    out: list[str] = []
    for item in view.items:
        parts = [f"{f.column}: {_mark(f.text, f.highlight)}" for f in item.fields]
        out.append(f"{item.index:>3}  " + "  ".join(parts))
    return out


def render_text(view: View) -> str:
    if view.empty_message:
        return view.empty_message
    if isinstance(view, TableView):
        lines = _table_text(view)
    elif isinstance(view, CardsView):
        lines = _cards_text(view)
    elif isinstance(view, ListView):
        lines = _list_text(view)
    else:  # pragma: no cover
        raise TypeError(f"unsupported view: {type(view).__name__}")
    if view.notice:
        lines.append(view.notice)
    return "\n".join(lines)
