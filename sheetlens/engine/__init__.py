"""
sheetlens engine: the pure projection and rule-evaluation core.

  cells       shared stringify / to_number / sort key
  conditions  evaluate(cell, operator, compare_value) -> bool
  rules       first-match-wins highlight / validation resolution
  projector   search + sort + visible column resolution

No IO, no shared state. Same inputs, same outputs.
"""

from .cells import sort_key, stringify, to_number
from .conditions import evaluate
from .projector import Projection, SortState, project
from .rules import active_rules, resolve_highlight, resolve_validation

__all__ = [
    "stringify",
    "to_number",
    "sort_key",
    "evaluate",
    "active_rules",
    "resolve_highlight",
    "resolve_validation",
    "Projection",
    "SortState",
    "project",
]
