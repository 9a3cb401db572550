"""Core evaluator for the egglisp interpreter.

`evaluate` is the public entry point; `evaluate0` is the recursive core that
special forms and builtins receive as their evaluator.
"""

from __future__ import annotations

from egglisp import SExpression, LispValue
from egglisp.evaluation.apply import apply
from egglisp.types.environment import Environment
from egglisp.types.errors import EggRecursionError
from egglisp.types.nil import Nil
from egglisp.types.pair import Pair
from egglisp.types.quoted import Quoted
from egglisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Evaluate one top-level expression in `env`.

    Exhausting the host stack is reported as EggRecursionError.
    """
    try:
        return evaluate0(expr, env)
    except RecursionError as exc:
        raise EggRecursionError("Maximum recursion depth exceeded") from exc


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    if expr is Nil:
        return Nil

    match expr:
        case Symbol():
            return env.lookup(expr)
        case Quoted(value=value):
            return value
        case Pair(head=head, tail=args):
            return apply(evaluate0(head, env), args, env, evaluate0)

    # --- Atoms return as-is ---
    return expr
