"""sheetlens: screens and rules over schema-less spreadsheet data.

Query helpers (pure):
  project, resolve_highlight, resolve_validation, evaluate
"""

from sheetlens.engine import evaluate, project, resolve_highlight, resolve_validation

__version__ = "0.1.0"

__all__ = [
    "evaluate",
    "project",
    "resolve_highlight",
    "resolve_validation",
]
