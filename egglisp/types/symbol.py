from __future__ import annotations
import sys


class Symbol:
    """Interned name: Symbol("x") is Symbol("x")."""
    __slots__ = ("id",)

    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str):
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.id = sys.intern(name)
            cls._table[sym.id] = sym
        return sym

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return self.id

    def __str__(self):
        return self.id
