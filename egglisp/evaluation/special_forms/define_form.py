from egglisp import EvaluatorFn
from egglisp import SExpression, LispValue
from egglisp.printer import to_repr
from egglisp.types.bind import get_args
from egglisp.types.errors import EggTypeError
from egglisp.types.nil import Nil
from egglisp.types.environment import Environment
from egglisp.types.symbol import Symbol


def define_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds a new name in the current scope; redefinition in the same scope fails.
    """
    name, val_expr = get_args(tail, 2, "def")
    if not isinstance(name, Symbol):
        raise EggTypeError(f"def first argument must be a symbol, got {to_repr(name)}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return Nil
