from __future__ import annotations


class NilType:
    """The empty list. There is exactly one instance, `Nil`."""

    __slots__ = ()
    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "()"
    def __bool__(self): return False
    def __iter__(self): return iter(())
    def __len__(self): return 0

    # Nil is only ever equal to itself
    def __eq__(self, other):
        return other is self

    def __hash__(self):
        return hash(NilType)

    def __reduce__(self):
        return NilType, ()


Nil = NilType()
