from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Union

from ..engine.projector import Projection, SortState, project
from ..engine.rules import active_rules
from ..models.screen import Screen, ScreenType
from ..store.memory import InMemoryStore, NotFoundError
from ..views import CardsView, ListView, TableView, render_view

"""Screen rendering service.

Ties the pipeline together for one screen:

    store -> project (search, sort) -> renderer -> rule engine -> evaluator

Rules are fetched for the screen's sheet and filtered to active ones once per
render. A screen whose sheet has been deleted renders as an empty projection
instead of failing.
"""

__all__ = [
    "ScreenNotFoundError",
    "ScreenRender",
    "render_screen",
]

logger = logging.getLogger(__name__)

View = Union[TableView, CardsView, ListView]


class ScreenNotFoundError(NotFoundError):
    def __init__(self, screen_id: Any) -> None:
        super().__init__("screen", screen_id)


@dataclass(frozen=True)
class ScreenRender:
    """Everything a page needs to draw one screen."""
    screen: Screen
    sheet_name: str | None
    projection: Projection
    view: View
    active_rule_names: list[str] = field(default_factory=list)

    @property
    def screen_type(self) -> ScreenType:
        return self.screen.type

    @property
    def row_count(self) -> int:
        """Rows after search, before the renderer cap."""
        return self.projection.total

    @property
    def sheet_missing(self) -> bool:
        return self.sheet_name is None


def render_screen(
    store: InMemoryStore,
    screen_id: Any,
    search_query: str = "",
    sort: SortState | None = None,
) -> ScreenRender:
    """Render one screen.

    Args:
        store: Record store holding the screen, its sheet and rules
        screen_id: Screen to render
        search_query: Case-insensitive substring over visible columns
        sort: Current sort state; None seeds it from the screen config

    Raises:
        ScreenNotFoundError: screen_id does not exist
    """
    try:
        screen = store.get_screen(screen_id)
    except NotFoundError:
        raise ScreenNotFoundError(screen_id) from None

    if sort is None:
        sort = SortState.from_config(screen.config)

    sheet = store.find_sheet(screen.sheet_id)
    if sheet is None:
        logger.warning(f"screen {screen.id} references missing sheet {screen.sheet_id} -> empty projection")
        rules = []
    else:
        rules = active_rules(store.list_rules(sheet_id=sheet.id))

    projection = project(sheet, screen.config, search_query, sort)
    view = render_view(screen.type, projection, rules, screen.config)

    logger.debug(
        f"screen={screen.id} type={screen.type.value} rows={projection.total} "
        f"shown={view.shown} active_rules={len(rules)} query={search_query!r} "
        f"sort={sort.column}:{sort.direction.value}"
    )
    return ScreenRender(
        screen=screen,
        sheet_name=sheet.name if sheet is not None else None,
        projection=projection,
        view=view,
        active_rule_names=[r.name for r in rules],
    )
