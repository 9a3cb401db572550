from egglisp import EvaluatorFn
from egglisp import SExpression, LispValue
from egglisp.types.environment import Environment
from egglisp.types.nil import Nil


def progn_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
