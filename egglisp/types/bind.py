from __future__ import annotations

from typing import Callable

from egglisp import LispValue, SExpression
from egglisp.types.environment import Environment
from egglisp.types.errors import EggArityError
from egglisp.types.nil import Nil
from egglisp.types.symbol import Symbol


def get_args(args: SExpression, count: int, what: str) -> list[SExpression]:
    """Walk the argument list expecting exactly `count` elements.

    Returns the elements as a Python list, or raises EggArityError
    (distinguishing too few from too many) before anything is evaluated.
    """
    items: list[SExpression] = []
    cell = args
    for _ in range(count):
        if cell is Nil:
            raise EggArityError(
                f"Too few arguments to {what}: expected {count}, got {len(items)}",
                too_few=True,
            )
        items.append(cell.head)
        cell = cell.tail
    if cell is not Nil:
        raise EggArityError(
            f"Too many arguments to {what}: expected {count}, got {count + len(cell)}"
        )
    return items


def bind_arguments(
    params: list[Symbol],
    args: SExpression,
    closure_env: Environment,
    value_of: Callable[[SExpression], LispValue],
    what: str = "function",
) -> Environment:
    """
    Single source of truth for parameter binding.

    Checks arity, maps each argument form through `value_of` (evaluation in
    the caller's scope for closures, identity for macros) left to right, then
    defines the values in a fresh Environment whose outer is `closure_env`.
    """
    forms = get_args(args, len(params), what)
    values = [value_of(form) for form in forms]
    local_env = Environment(outer=closure_env)
    for name, value in zip(params, values):
        local_env.define(name, value)
    return local_env
