"""Application engine for egglisp.

This module centralizes callable application semantics for the interpreter:
- Native functions get their arguments evaluated left to right first.
- Native special forms get the raw argument forms and decide themselves.
- Closures bind evaluated arguments in a fresh scope under the captured env.
- Macros bind the raw forms, and the expansion they return is evaluated
  again in the caller's env.

Keeping this logic in one place prevents duplication between the evaluator
and builtins such as `eval`.
"""

from __future__ import annotations

from egglisp import LispValue, SExpression, EvaluatorFn
from egglisp.printer import to_repr
from egglisp.types.bind import bind_arguments
from egglisp.types.environment import Environment
from egglisp.types.errors import EggNotCallableError
from egglisp.types.lambda_fn import Closure, Macro
from egglisp.types.native import NativeFunction, NativeSpecialForm
from egglisp.types.pair import Pair


def evaluate_args(args: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Evaluate every element of `args` in order, returning a fresh list."""
    return Pair.from_iterable([evaluate_fn(arg, env) for arg in args])


def apply_closure(fn: Closure, args: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    new_env = bind_arguments(fn.params, args, fn.env, lambda form: evaluate_fn(form, env))
    return evaluate_fn(fn.body, new_env)


def apply_macro(macro: Macro, args: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    new_env = bind_arguments(macro.params, args, macro.env, lambda form: form, what="macro")
    expansion = evaluate_fn(macro.body, new_env)
    return evaluate_fn(expansion, env)


def apply(
    head: LispValue,
    args: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply `head` to the unevaluated argument list `args` in `env`."""
    match head:
        case NativeFunction():
            return head(env, evaluate_args(args, env, evaluate_fn))
        case NativeSpecialForm():
            return head(args, env, evaluate_fn)
        case Macro():
            return apply_macro(head, args, env, evaluate_fn)
        case Closure():
            return apply_closure(head, args, env, evaluate_fn)
    raise EggNotCallableError(f"Value {to_repr(head)} cannot be applied")
