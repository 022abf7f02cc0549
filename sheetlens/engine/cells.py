from __future__ import annotations

import math
import re
import unicodedata
from decimal import Decimal
from typing import Any

"""Cell coercion shared by the condition evaluator, search and sort.

Sheet cells are schema-less (str | int | float | bool | None). Every call site
that needs a cell's text goes through stringify() so that search, sort and
rule evaluation agree on what a cell "says":

- None            -> ""
- True / False    -> "true" / "false"
- 30.0            -> "30"   (integral floats print without a fraction)
- nan / inf       -> "NaN" / "Infinity" / "-Infinity"

to_number() mirrors the lenient string-to-number conversion used by the
spreadsheet front end: blank text is 0, anything unparseable is NaN.
"""

__all__ = [
    "stringify",
    "to_number",
    "contains_ci",
    "sort_key",
]

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_RADIX_RE = re.compile(r"^0([xXoObB])([0-9a-fA-F]+)$", re.ASCII)
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}
_DIGIT_RUN_RE = re.compile(r"(\d+)")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        if abs(value) < 2**53:
            return str(int(value))
        # 2**53 以上は最短桁 (repr) を展開し、残りは 0 埋め
        return format(Decimal(repr(value)).normalize(), "f")
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exp = text.split("e")
    exponent = int(exp)
    if -7 < exponent < 21:
        # repr の指数表記を展開 (例: 1e-05 -> 0.00001)
        return format(Decimal(text), "f")
    sign = "+" if exponent > 0 else "-"
    return f"{mantissa}e{sign}{abs(exponent)}"


def stringify(value: Any) -> str:
    """Return the display/comparison text of a cell value."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def to_number(text: str | None) -> float:
    """Convert text to a float; NaN when it does not read as a number."""
    if text is None:
        return math.nan
    t = text.strip()
    if t == "":
        return 0.0
    if _DECIMAL_RE.match(t):
        return float(t)
    if t in ("Infinity", "+Infinity"):
        return math.inf
    if t == "-Infinity":
        return -math.inf
    m = _RADIX_RE.match(t)
    if m:
        try:
            return float(int(m.group(2), _RADIX_BASES[m.group(1).lower()]))
        except ValueError:
            return math.nan
    return math.nan


def contains_ci(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test."""
    return needle.lower() in haystack.lower()


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def sort_key(value: Any) -> tuple:
    """Locale-ish, numeric-aware sort key for a cell value.

    Digit runs compare by numeric value ("9" < "10"); every other character
    compares on its own, case- and accent-insensitively, with spaces and
    punctuation before digits before letters ("A 1" < "A1"). Ties fall back
    to the original text with lowercase first.
    """
    text = stringify(value)
    parts: list[tuple[int, int, str]] = []
    for i, chunk in enumerate(_DIGIT_RUN_RE.split(_fold(text))):
        if i % 2:
            parts.append((1, int(chunk), ""))
            continue
        for ch in chunk:
            parts.append((2 if ch.isalpha() else 0, 0, ch))
    return (tuple(parts), text.swapcase())
