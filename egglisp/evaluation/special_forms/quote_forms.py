from egglisp import SExpression, LispValue, EvaluatorFn
from egglisp.types.bind import get_args
from egglisp.types.environment import Environment


def quote_form(
    tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(quote expr) returns expr unevaluated, like the 'expr literal."""
    return get_args(tail, 1, "quote")[0]
