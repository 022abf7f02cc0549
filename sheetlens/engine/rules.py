from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from ..models.rule import DEFAULT_VALIDATION_MESSAGE, Rule, RuleType
from .conditions import evaluate

"""Rule engine: first-match-wins resolution of per-cell rule payloads.

Callers pass rules already filtered to active ones (active_rules() once per
render, not once per cell). Resolution is an ordered scan with early return;
precedence is the order the rules are given in, there is no priority field.
"""

__all__ = [
    "active_rules",
    "resolve_highlight",
    "resolve_validation",
]


def active_rules(rules: Iterable[Rule]) -> list[Rule]:
    """Keep only rules with active=True, preserving order."""
    return [r for r in rules if r.active is True]


def _first_match(row: dict[str, Any], column: str, rules: Sequence[Rule], rule_type: RuleType) -> Rule | None:
    value = row.get(column)
    for rule in rules:
        if rule.type is not rule_type or rule.column != column:
            continue
        if evaluate(value, rule.config.operator, rule.config.value):
            return rule
    return None


def resolve_highlight(row: dict[str, Any], column: str, rules: Sequence[Rule]) -> str | None:
    """Color of the first matching highlight rule for the cell, else None.

    A matching rule without a color yields None; later rules are not consulted.
    """
    rule = _first_match(row, column, rules, RuleType.HIGHLIGHT)
    if rule is None:
        return None
    return rule.config.highlight_color or None


def resolve_validation(row: dict[str, Any], column: str, rules: Sequence[Rule]) -> str | None:
    """Message of the first matching validation rule for the cell, else None."""
    rule = _first_match(row, column, rules, RuleType.VALIDATION)
    if rule is None:
        return None
    return rule.config.message or DEFAULT_VALIDATION_MESSAGE
