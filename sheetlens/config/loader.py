from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.rule import Rule
from ..models.screen import Screen
from ..models.sheet import Project, Sheet
from ..store.memory import InMemoryStore, StoreError

"""Workspace loader: YAML file -> InMemoryStore.

A workspace file carries everything the engine reads (projects, sheets with
inline columns/data, screens, rules). Responsibilities:
- Load YAML (safe_load)
- Validate against the packaged JSON schema (workspace_schema.json)
- Build model objects and insert them into a store in file order
  (rule order in the file is rule precedence)
- Write a store back out (after toggling rules / editing configs)
"""

__all__ = [
    "SCHEMA_PATH",
    "WorkspaceError",
    "load_workspace",
    "workspace_from_dict",
    "workspace_to_dict",
    "dump_workspace",
]

SCHEMA_PATH = Path(__file__).parent / "workspace_schema.json"


class WorkspaceError(Exception):
    pass


def _validate_workspace_schema(data: dict[str, Any]) -> None:
    """Validate workspace data against the JSON schema.

    Raises:
        WorkspaceError: schema file missing / not valid JSON, or the data
            fails validation (missing keys, wrong types, unknown screen type).
    """
    if not SCHEMA_PATH.exists():
        raise WorkspaceError(f"workspace schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise WorkspaceError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise WorkspaceError(f"workspace validation failed at {location}: {e.message}") from e


def workspace_from_dict(data: dict[str, Any]) -> InMemoryStore:
    _validate_workspace_schema(data)

    store = InMemoryStore()
    try:
        for p in data.get("projects") or []:
            store.add_project(Project.from_dict(p))
        for s in data.get("sheets") or []:
            sheet = Sheet.from_dict(s)
            if store.list_projects() and sheet.project_id is not None:
                store.get_project(sheet.project_id)
            store.add_sheet(sheet)
        for sc in data.get("screens") or []:
            if sc.get("projectId") is None:
                # projectId 省略時はシートのプロジェクトを継承
                sheet = store.get_sheet(sc["sheetId"])
                sc = {**sc, "projectId": sheet.project_id}
            store.add_screen(Screen.from_dict(sc))
        for r in data.get("rules") or []:
            store.add_rule(Rule.from_dict(r))
    except StoreError as e:
        raise WorkspaceError(f"inconsistent workspace: {e}") from e
    return store


def load_workspace(path: Path) -> InMemoryStore:
    if not path.exists():
        raise WorkspaceError(f"workspace file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise WorkspaceError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise WorkspaceError(f"workspace root must be a mapping, got {type(data).__name__}")
    return workspace_from_dict(data)


def workspace_to_dict(store: InMemoryStore) -> dict[str, Any]:
    return {
        "projects": [p.to_dict() for p in store.list_projects()],
        "sheets": [s.to_dict() for s in store.list_sheets()],
        "screens": [s.to_dict() for s in store.list_screens()],
        "rules": [r.to_dict() for r in store.list_rules()],
    }


def dump_workspace(store: InMemoryStore, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    text = yaml.safe_dump(workspace_to_dict(store), sort_keys=False, allow_unicode=True)
    path.write_text(text, encoding="utf-8")
    return path
