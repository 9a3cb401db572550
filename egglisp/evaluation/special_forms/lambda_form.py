from egglisp import EvaluatorFn
from egglisp import SExpression, LispValue
from egglisp.printer import to_repr
from egglisp.types.bind import get_args
from egglisp.types.errors import EggArgumentError, EggTypeError
from egglisp.types.environment import Environment
from egglisp.types.lambda_fn import Closure, Macro
from egglisp.types.pair import is_list
from egglisp.types.symbol import Symbol


def parse_params(params: SExpression, what: str) -> list[Symbol]:
    if not is_list(params):
        raise EggTypeError(f"{what} parameters must be a list, got {to_repr(params)}")
    names: list[Symbol] = []
    for p in params:
        if not isinstance(p, Symbol):
            raise EggTypeError(f"{what} parameter must be a symbol, got {to_repr(p)}")
        if p in names:
            raise EggArgumentError(f"Duplicate parameter {p} in {what}")
        names.append(p)
    return names


def lambda_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(fn (params...) body) captures the current scope by reference."""
    params, body = get_args(tail, 2, "fn")
    return Closure(parse_params(params, "fn"), body, env)


def macro_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(macro (params...) body): params are bound to the unevaluated argument forms."""
    params, body = get_args(tail, 2, "macro")
    return Macro(parse_params(params, "macro"), body, env)
