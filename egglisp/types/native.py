"""Host-implemented callables.

A NativeFunction receives its arguments already evaluated, as a list value,
together with the calling environment: ``fn(env, args)``.

A NativeSpecialForm receives its argument forms unevaluated, the calling
environment and the evaluator to use: ``fn(args, env, evaluate_fn)``.
"""

from __future__ import annotations

from typing import Callable

from egglisp import EvaluatorFn, LispValue, SExpression


class NativeFunction:
    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, env, args: SExpression) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f'<builtin "{self.name}">'


class NativeSpecialForm:
    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: SExpression, env, evaluate_fn: EvaluatorFn) -> LispValue:
        return self.fn(args, env, evaluate_fn)

    def __repr__(self) -> str:
        return f'<specialform "{self.name}">'
