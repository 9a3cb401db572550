"""User-defined callables: closures and macros."""

from __future__ import annotations

from io import StringIO

from egglisp import SExpression
from egglisp.printer import to_repr
from egglisp.types.environment import Environment
from egglisp.types.symbol import Symbol


class Closure:
    """A first-class function with formal parameters, body, and closure env."""

    __slots__ = ("params", "body", "env")
    kind = "function"

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        # Shared, not copied: the defining scope itself
        self.env: Environment = env

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"<{self.kind} (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") -> ")
            buffer.write(to_repr(self.body))
            buffer.write(">")
            return buffer.getvalue()


class Macro(Closure):
    """Binds its parameters to the raw argument forms; its result is evaluated again."""

    __slots__ = ()
    kind = "macro"
