"""Screen renderers (table / cards / list) and their plain-text output."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from ..engine.projector import Projection
from ..models.rule import Rule
from ..models.screen import ScreenConfig, ScreenType
from .cards import CardsView, render_cards
from .list_view import ListView, render_list
from .table import TableView, render_table
from .text import render_text

__all__ = [
    "CardsView",
    "ListView",
    "TableView",
    "render_cards",
    "render_list",
    "render_table",
    "render_text",
    "render_view",
]


def render_view(
    screen_type: ScreenType,
    projection: Projection,
    rules: Sequence[Rule],
    config: ScreenConfig | None = None,
) -> Union[TableView, CardsView, ListView]:
    """Dispatch a projection to the renderer for the screen's type."""
    if screen_type is ScreenType.CARDS:
        return render_cards(projection, rules, config)
    if screen_type is ScreenType.LIST:
        return render_list(projection, rules)
    return render_table(projection, rules)
