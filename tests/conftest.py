# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from sheetlens.logging.init import reset_logging
from sheetlens.models import Rule, RuleConfig, RuleType, Sheet


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "exports").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("SHEETLENS_WORKSPACE", raising=False)
        monkeypatch.delenv("SHEETLENS_EXPORT_DIR", raising=False)
        yield p


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def sample_workspace_yaml() -> str:
    return """projects:
  - id: 1
    name: Demo
sheets:
  - id: 10
    projectId: 1
    name: People
    columns: [Name, Age, Email]
    data:
      - {Name: Ann, Age: "30", Email: ann@example.com}
      - {Name: Bob, Age: "9", Email: ""}
      - {Name: Cid, Age: "41"}
screens:
  - id: 100
    projectId: 1
    sheetId: 10
    name: People table
    type: table
  - id: 101
    projectId: 1
    sheetId: 10
    name: People cards
    type: cards
    config:
      cardTitleColumn: Name
  - id: 102
    projectId: 1
    sheetId: 10
    name: People list
    type: list
    config:
      visibleColumns: [Name, Age]
rules:
  - id: 1000
    sheetId: 10
    name: Senior
    column: Age
    type: highlight
    config: {operator: greater_than, value: "20", highlightColor: "#ef4444"}
    active: true
  - id: 1001
    sheetId: 10
    name: Missing @
    column: Email
    type: validation
    config: {operator: contains, value: "@", message: "has @"}
    active: false
"""


@pytest.fixture()
def write_workspace(temp_workdir: Path, sample_workspace_yaml: str) -> Path:
    ws = temp_workdir / "config" / "workspace.yml"
    ws.write_text(sample_workspace_yaml, encoding="utf-8")
    return ws


@pytest.fixture()
def people_sheet() -> Sheet:
    return Sheet(
        id=1,
        project_id=1,
        name="People",
        columns=["Name", "Age"],
        data=[{"Name": "Ann", "Age": "30"}, {"Name": "Bob", "Age": "9"}],
    )


@pytest.fixture()
def make_rule():
    counter = {"n": 0}

    def _make(column: str, rule_type: str, active: bool = True, **config) -> Rule:
        counter["n"] += 1
        return Rule(
            id=counter["n"],
            sheet_id=1,
            name=f"rule {counter['n']}",
            column=column,
            type=RuleType(rule_type),
            config=RuleConfig.from_dict(config),
            active=active,
        )

    return _make
