from egglisp import EvaluatorFn
from egglisp import SExpression, LispValue
from egglisp.printer import to_repr
from egglisp.types.bind import get_args
from egglisp.types.errors import EggArgumentError
from egglisp.types.environment import Environment


def if_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    cond_expr, then_expr, else_expr = get_args(tail, 3, "if")

    cond = evaluate_fn(cond_expr, env)
    # No truthiness: the condition must be one of the two booleans
    if cond is True:
        return evaluate_fn(then_expr, env)
    if cond is False:
        return evaluate_fn(else_expr, env)
    raise EggArgumentError(f"if condition must be a boolean, got {to_repr(cond)}")
