"""Runtime environment for egglisp.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Environments are shared by reference: every
Closure/Macro created in a scope holds that very scope, so a mutation through
one alias is visible through all of them. An Environment is also a first-class
value (see the `env`, `globals` and `closure` builtins).
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from egglisp import LispValue
from egglisp.printer import to_repr
from egglisp.types.errors import EggDuplicateDefinitionError, EggNameError, EggTypeError
from egglisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    # ids of environments whose repr is in progress; a scope can reach itself
    # through its own values, e.g. (def e (list (env)))
    _rendering: set[int] = set()

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind a new `name` in this scope only.

        Raises EggDuplicateDefinitionError if `name` is already bound here.
        Shadowing a binding of an enclosing scope is allowed.
        """
        if not isinstance(name, Symbol):
            raise EggTypeError(f"Cannot define {to_repr(name)}: not a symbol")
        if name in self.vars:
            raise EggDuplicateDefinitionError(f"{name} is already defined")
        self.vars[name] = value

    def assign(self, name: Symbol, value: LispValue) -> None:
        """Rebind an existing `name` in this scope only (no parent search)."""
        if name not in self.vars:
            raise EggNameError(f"{name} is not defined in this scope")
        self.vars[name] = value

    def assign_nonlocal(self, name: Symbol, value: LispValue) -> None:
        """Rebind the nearest enclosing binding of `name`."""
        env = self.find(name)
        if env is None:
            raise EggNameError(f"{name} is undefined")
        env.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        env = self.find(name)
        if env is None:
            raise EggNameError(f"{name} is undefined")
        return env.vars[name]

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer as {name=repr, ...}."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}={to_repr(v)}")
            first = False
        buffer.write("}")

    def __repr__(self) -> str:
        key = id(self)
        if key in Environment._rendering:
            return "<environment ...>"
        Environment._rendering.add(key)
        try:
            with StringIO() as buffer:
                buffer.write("<environment ")
                self._write_vars(buffer)
                buffer.write(">")
                return buffer.getvalue()
        finally:
            Environment._rendering.discard(key)
