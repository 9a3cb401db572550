"""Textual rendering of egglisp values.

`to_repr` produces the source-like form used by the REPL and by `repr`;
`to_str` is identical except that a top-level String renders as its raw text.
Composite values (Pair, Quoted, callables, Environment) implement `__repr__`
in terms of `to_repr`, so this module does not import them.
"""

from __future__ import annotations

import math
from decimal import Decimal

from egglisp import LispValue


def format_number(value: float) -> str:
    """Render a float as a literal the lexer accepts (no sign on the exponent)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        # 1e-05 -> 0.00001
        text = format(Decimal(text), "f")
    return text


def to_repr(value: LispValue) -> str:
    if value is True:
        return "#t"
    if value is False:
        return "#f"
    if isinstance(value, (int, float)):
        return format_number(float(value))
    if isinstance(value, str):
        return f'"{value}"'
    return repr(value)


def to_str(value: LispValue) -> str:
    if isinstance(value, str):
        return value
    return to_repr(value)
