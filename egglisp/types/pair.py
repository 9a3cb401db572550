"""Cons cells.

A list is a right-nested chain of Pair cells terminated by Nil. The tail of
every Pair is checked at construction time, so traversal never has to.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from egglisp import LispValue
from egglisp.printer import to_repr
from egglisp.types.errors import EggTypeError
from egglisp.types.nil import Nil, NilType


class Pair:
    __slots__ = ("head", "tail")

    def __init__(self, head: LispValue, tail: Pair | NilType = Nil):
        if tail is not Nil and not isinstance(tail, Pair):
            raise EggTypeError(f"Pair tail must be a list, got {to_repr(tail)}")
        self.head = head
        self.tail = tail

    @classmethod
    def from_iterable(cls, items: Iterable[LispValue]) -> Pair | NilType:
        result: Pair | NilType = Nil
        for item in reversed(list(items)):
            result = cls(item, result)
        return result

    def __iter__(self) -> Iterator[LispValue]:
        cell: Pair | NilType = self
        while cell is not Nil:
            yield cell.head
            cell = cell.tail

    def __len__(self) -> int:
        n = 0
        for _ in self:
            n += 1
        return n

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        a, b = self, other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if not values_equal(a.head, b.head):
                return False
            a, b = a.tail, b.tail
        return a is b

    __hash__ = None

    def __repr__(self) -> str:
        return "(" + " ".join(to_repr(item) for item in self) + ")"


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality that never conflates booleans with numbers."""
    if a is b:
        return True
    return type(a) is type(b) and a == b


def is_list(value: LispValue) -> bool:
    return value is Nil or isinstance(value, Pair)
