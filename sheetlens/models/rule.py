from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

"""Rule model: a per-column declarative condition with a payload.

Rule types:
- validation: payload is `message` (falls back to "Validation failed")
- highlight:  payload is `highlight_color`
- format:     `format` is advisory and never read by rendering

The operator is kept as a plain string rather than coerced into the Operator
enum so that configs written with an operator this version does not know about
still load; such rules simply never fire.
"""

__all__ = [
    "RuleType",
    "Operator",
    "RuleConfig",
    "Rule",
    "DEFAULT_VALIDATION_MESSAGE",
]

DEFAULT_VALIDATION_MESSAGE = "Validation failed"


class RuleType(Enum):
    VALIDATION = "validation"
    HIGHLIGHT = "highlight"
    FORMAT = "format"


class Operator(str, Enum):
    """Known condition operators.

    NOTE: NOT_EMPTY / IS_EMPTY evaluate with inverted truth tables relative
    to their labels (see engine.conditions). Stored rules depend on it.
    """
    NOT_EMPTY = "not_empty"
    IS_EMPTY = "is_empty"
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"


def _as_str(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # YAML/JSON が数値で保存した比較値 (例: 20) は文字列化
    from ..engine.cells import stringify
    return stringify(value)


@dataclass(frozen=True)
class RuleConfig:
    operator: str | None = None
    value: str | None = None
    highlight_color: str | None = None
    message: str | None = None
    format: str | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any] | None) -> RuleConfig:
        if not d:
            return cls()
        op = d.get("operator")
        return cls(
            operator=op.value if isinstance(op, Operator) else op,
            value=_as_str(d.get("value")),
            highlight_color=d.get("highlightColor"),
            message=d.get("message"),
            format=d.get("format"),
        )

    def to_dict(self) -> dict[str, Any]:
        raw = {
            "operator": self.operator,
            "value": self.value,
            "highlightColor": self.highlight_color,
            "message": self.message,
            "format": self.format,
        }
        return {k: v for k, v in raw.items() if v is not None}


@dataclass(frozen=True)
class Rule:
    id: Any
    sheet_id: Any
    name: str
    column: str
    type: RuleType
    config: RuleConfig = field(default_factory=RuleConfig)
    active: bool = True

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Rule:
        return cls(
            id=d["id"],
            sheet_id=d["sheetId"],
            name=d.get("name", ""),
            column=str(d["column"]),
            type=RuleType(d["type"]),
            config=RuleConfig.from_dict(d.get("config")),
            active=bool(d.get("active", True)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "sheetId": self.sheet_id,
            "name": self.name,
            "column": self.column,
            "type": self.type.value,
            "config": self.config.to_dict(),
            "active": self.active,
        }
