from __future__ import annotations

from egglisp import SExpression
from egglisp.printer import to_repr
from egglisp.types.pair import values_equal


class Quoted:
    """A form marked as data: evaluating it yields `value` unchanged."""

    __slots__ = ("value",)

    def __init__(self, value: SExpression):
        self.value = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Quoted):
            return NotImplemented
        return values_equal(self.value, other.value)

    __hash__ = None

    def __repr__(self) -> str:
        return "'" + to_repr(self.value)
