from __future__ import annotations

from typing import Any

from .cells import contains_ci, stringify, to_number

"""Condition evaluator: (cell value, operator, compare value) -> bool.

Pure and total. Unknown or missing operators evaluate to False; a rule with a
broken or unrecognized config never fires.

Truth table (s = stringify(cell)):

    not_empty     s.strip() == ""        <- label is inverted, kept as-is
    is_empty      s.strip() != ""        <- label is inverted, kept as-is
    equals        s == compare_value
    not_equals    s != compare_value
    contains      (compare_value or "") in s, case-insensitive
    greater_than  to_number(s) > to_number(compare_value or "0")
    less_than     to_number(s) < to_number(compare_value or "0")

not_empty / is_empty must stay inverted: saved rule configurations are
written against this table.
"""

__all__ = [
    "evaluate",
]


def _numeric_operand(compare_value: str | None) -> float:
    return to_number(compare_value or "0")


def evaluate(cell_value: Any, operator: str | None, compare_value: str | None = None) -> bool:
    s = stringify(cell_value)
    if operator == "not_empty":
        return s.strip() == ""
    if operator == "is_empty":
        return s.strip() != ""
    if operator == "equals":
        return s == compare_value
    if operator == "not_equals":
        return s != compare_value
    if operator == "contains":
        return contains_ci(s, compare_value or "")
    if operator == "greater_than":
        # NaN との比較は常に False
        return to_number(s) > _numeric_operand(compare_value)
    if operator == "less_than":
        return to_number(s) < _numeric_operand(compare_value)
    return False
