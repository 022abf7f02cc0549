"""Domain models for the sheetlens projection engine.

Sheets hold schema-less rows; Screens and Rules are the user-defined
configurations evaluated against them.
"""

from .export_result import ExportResult, ScreenStat
from .rule import DEFAULT_VALIDATION_MESSAGE, Operator, Rule, RuleConfig, RuleType
from .screen import Screen, ScreenConfig, ScreenType, SortDirection
from .sheet import CellValue, Project, Row, Sheet

__all__ = [
    # Tabular data
    "CellValue",
    "Project",
    "Row",
    "Sheet",
    # Screens
    "Screen",
    "ScreenConfig",
    "ScreenType",
    "SortDirection",
    # Rules
    "DEFAULT_VALIDATION_MESSAGE",
    "Operator",
    "Rule",
    "RuleConfig",
    "RuleType",
    # Export results
    "ExportResult",
    "ScreenStat",
]
