from egglisp import EvaluatorFn
from egglisp import SExpression, LispValue
from egglisp.printer import to_repr
from egglisp.types.bind import get_args
from egglisp.types.errors import EggTypeError
from egglisp.types.symbol import Symbol
from egglisp.types.environment import Environment


def _target(tail: SExpression, name: str) -> tuple[Symbol, SExpression]:
    var_sym, val_expr = get_args(tail, 2, name)
    if not isinstance(var_sym, Symbol):
        raise EggTypeError(f"{name} first argument must be a symbol, got {to_repr(var_sym)}")
    return var_sym, val_expr


def set_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set! var value): rebind var in the current scope only."""
    var_sym, val_expr = _target(tail, "set!")
    value = evaluate_fn(val_expr, env)
    env.assign(var_sym, value)
    return value


def set_nonlocal_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set* var value): rebind the nearest enclosing binding of var."""
    var_sym, val_expr = _target(tail, "set*")
    value = evaluate_fn(val_expr, env)
    env.assign_nonlocal(var_sym, value)
    return value
