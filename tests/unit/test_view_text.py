from __future__ import annotations

from sheetlens.engine.projector import SortState, project
from sheetlens.models import ScreenConfig, Sheet
from sheetlens.views import render_text
from sheetlens.views.cards import render_cards
from sheetlens.views.list_view import render_list
from sheetlens.views.table import render_table


def test_table_text_marks_highlight_validation_and_sort(people_sheet, make_rule):
    rules = [
        make_rule("Age", "highlight", operator="greater_than", value="20", highlightColor="#ef4444"),
        make_rule("Age", "validation", operator="less_than", value="18", message="minor"),
    ]
    text = render_text(render_table(project(people_sheet, sort=SortState(column="Age")), rules))
    lines = text.splitlines()
    assert lines[0].startswith("#")
    assert "Age ^" in lines[0]
    assert "30 *#ef4444" in text
    assert "9 !" in text
    assert "    ! Age: minor" in lines


def test_empty_view_text():
    sheet = Sheet(id=1, project_id=1, name="S", columns=["A"], data=[])
    assert render_text(render_table(project(sheet), [])) == "No matching rows"


def test_truncated_view_text_ends_with_notice():
    sheet = Sheet(id=1, project_id=1, name="S", columns=["A"], data=[{"A": i} for i in range(120)])
    text = render_text(render_list(project(sheet), []))
    assert text.splitlines()[-1] == "Showing first 100 of 120 rows"


def test_cards_text(people_sheet):
    text = render_text(render_cards(project(people_sheet), [], ScreenConfig(card_title_column="Name")))
    assert "[1] Ann" in text
    assert "[2] Bob" in text
