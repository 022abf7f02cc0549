from __future__ import annotations

import dataclasses
import logging
from typing import Any

from ..models.rule import Rule, RuleConfig
from ..models.screen import Screen, ScreenConfig
from ..models.sheet import Project, Sheet

"""In-memory key-based store for projects, sheets, screens and rules.

The engine only reads from the store at projection time. The writes it
performs on behalf of a user are limited to:
- toggling a rule's `active` flag
- replacing a screen's or rule's `config`

Listings preserve insertion order; rule order is the precedence order the
rule engine uses (earliest created first).

Relationship checks happen on create only. Deleting a sheet leaves its
screens and rules in place; they are resolved lazily (missing sheet -> empty
projection).

Not thread-safe (single process, serial access).
"""

__all__ = [
    "StoreError",
    "NotFoundError",
    "InMemoryStore",
]

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base exception for store operations."""
    pass


class NotFoundError(StoreError, KeyError):
    """Raised when a record id does not exist."""

    def __init__(self, kind: str, record_id: Any) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found: {record_id!r}")

    def __str__(self) -> str:  # KeyError は repr を返すため上書き
        return f"{self.kind} not found: {self.record_id!r}"


class InMemoryStore:
    def __init__(self) -> None:
        self._projects: dict[Any, Project] = {}
        self._sheets: dict[Any, Sheet] = {}
        self._screens: dict[Any, Screen] = {}
        self._rules: dict[Any, Rule] = {}

    # -- projects ---------------------------------------------------------

    def add_project(self, project: Project) -> Project:
        if project.id in self._projects:
            raise StoreError(f"duplicate project id: {project.id!r}")
        self._projects[project.id] = project
        return project

    def get_project(self, project_id: Any) -> Project:
        try:
            return self._projects[project_id]
        except KeyError:
            raise NotFoundError("project", project_id) from None

    def list_projects(self) -> list[Project]:
        return list(self._projects.values())

    # -- sheets -----------------------------------------------------------

    def add_sheet(self, sheet: Sheet) -> Sheet:
        if sheet.id in self._sheets:
            raise StoreError(f"duplicate sheet id: {sheet.id!r}")
        if len(set(sheet.columns)) != len(sheet.columns):
            raise StoreError(f"sheet {sheet.id!r} has duplicate column names")
        self._sheets[sheet.id] = sheet
        logger.debug(f"sheet added id={sheet.id} cols={len(sheet.columns)} rows={len(sheet.data)}")
        return sheet

    def get_sheet(self, sheet_id: Any) -> Sheet:
        try:
            return self._sheets[sheet_id]
        except KeyError:
            raise NotFoundError("sheet", sheet_id) from None

    def find_sheet(self, sheet_id: Any) -> Sheet | None:
        """Like get_sheet() but returns None for a dangling reference."""
        return self._sheets.get(sheet_id)

    def list_sheets(self, project_id: Any | None = None) -> list[Sheet]:
        return [s for s in self._sheets.values() if project_id is None or s.project_id == project_id]

    def delete_sheet(self, sheet_id: Any) -> None:
        if self._sheets.pop(sheet_id, None) is None:
            raise NotFoundError("sheet", sheet_id)

    # -- screens ----------------------------------------------------------

    def add_screen(self, screen: Screen) -> Screen:
        if screen.id in self._screens:
            raise StoreError(f"duplicate screen id: {screen.id!r}")
        self.get_sheet(screen.sheet_id)
        self._screens[screen.id] = screen
        return screen

    def get_screen(self, screen_id: Any) -> Screen:
        try:
            return self._screens[screen_id]
        except KeyError:
            raise NotFoundError("screen", screen_id) from None

    def list_screens(self, project_id: Any | None = None) -> list[Screen]:
        return [s for s in self._screens.values() if project_id is None or s.project_id == project_id]

    def update_screen_config(self, screen_id: Any, config: ScreenConfig | dict[str, Any]) -> Screen:
        screen = self.get_screen(screen_id)
        if isinstance(config, dict):
            config = ScreenConfig.from_dict(config)
        updated = dataclasses.replace(screen, config=config)
        self._screens[screen_id] = updated
        return updated

    def delete_screen(self, screen_id: Any) -> None:
        if self._screens.pop(screen_id, None) is None:
            raise NotFoundError("screen", screen_id)

    # -- rules ------------------------------------------------------------

    def add_rule(self, rule: Rule) -> Rule:
        if rule.id in self._rules:
            raise StoreError(f"duplicate rule id: {rule.id!r}")
        self.get_sheet(rule.sheet_id)
        self._rules[rule.id] = rule
        return rule

    def get_rule(self, rule_id: Any) -> Rule:
        try:
            return self._rules[rule_id]
        except KeyError:
            raise NotFoundError("rule", rule_id) from None

    def list_rules(self, sheet_id: Any | None = None, project_id: Any | None = None) -> list[Rule]:
        """Rules of one sheet, or of every sheet in a project, in creation order.

        Rules whose sheet no longer exists are not listed by project.
        """
        if sheet_id is not None:
            return [r for r in self._rules.values() if r.sheet_id == sheet_id]
        if project_id is not None:
            sheet_ids = {s.id for s in self.list_sheets(project_id)}
            return [r for r in self._rules.values() if r.sheet_id in sheet_ids]
        return list(self._rules.values())

    def set_rule_active(self, rule_id: Any, active: bool) -> Rule:
        rule = self.get_rule(rule_id)
        updated = dataclasses.replace(rule, active=bool(active))
        self._rules[rule_id] = updated
        logger.debug(f"rule {rule_id} active={updated.active}")
        return updated

    def update_rule_config(self, rule_id: Any, config: RuleConfig | dict[str, Any]) -> Rule:
        rule = self.get_rule(rule_id)
        if isinstance(config, dict):
            config = RuleConfig.from_dict(config)
        updated = dataclasses.replace(rule, config=config)
        self._rules[rule_id] = updated
        return updated

    def delete_rule(self, rule_id: Any) -> None:
        if self._rules.pop(rule_id, None) is None:
            raise NotFoundError("rule", rule_id)
