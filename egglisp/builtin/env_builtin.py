"""Built-in functions for the egglisp runtime environment.

This module defines core arithmetic, list processing, predicates,
introspection and printing helpers exposed to Lisp code, plus `register`,
which installs them (and the special forms) into a fresh global environment.

Every builtin has the NativeFunction signature ``fn(env, args)`` where
`args` is the already-evaluated argument list (Nil or a Pair chain).
"""
from __future__ import annotations

import math
from typing import Callable, Iterable

from egglisp import LispValue
from egglisp.evaluation.evaluator import evaluate0
from egglisp.evaluation.special_forms import SPECIAL_FORMS
from egglisp.printer import to_repr, to_str
from egglisp.types.bind import get_args
from egglisp.types.environment import Environment
from egglisp.types.errors import EggArgumentError, EggArityError, EggTypeError
from egglisp.types.lambda_fn import Closure, Macro
from egglisp.types.native import NativeFunction, NativeSpecialForm
from egglisp.types.nil import Nil
from egglisp.types.pair import Pair, is_list
from egglisp.types.quoted import Quoted
from egglisp.types.symbol import Symbol


def type_of(value: LispValue) -> str:
    """Return the tag name of a value, as reported by `type-of`."""
    if value is Nil:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Symbol):
        return "symbol"
    if isinstance(value, Pair):
        return "list"
    if isinstance(value, Quoted):
        return "quoted"
    if isinstance(value, NativeFunction):
        return "builtin"
    if isinstance(value, NativeSpecialForm):
        return "specialform"
    if isinstance(value, Macro):
        return "macro"
    if isinstance(value, Closure):
        return "function"
    if isinstance(value, Environment):
        return "environment"
    raise EggTypeError(f"Unknown value {value!r}")


# -------------------------------
# Arithmetic
# -------------------------------
def _numbers(name: str, args: Iterable[LispValue]) -> list[float]:
    """Numbers pass through; booleans coerce to 0/1; anything else is an error."""
    result = []
    for x in args:
        if isinstance(x, bool):
            result.append(1.0 if x else 0.0)
        elif isinstance(x, (int, float)):
            result.append(float(x))
        else:
            raise EggTypeError(f"Arguments to {name} must be numbers or booleans, got {to_repr(x)}")
    return result


def add(env: Environment, args: LispValue) -> float:
    """Return the numeric sum of all arguments; 0 for no arguments."""
    acc = 0.0
    for x in _numbers("+", args):
        acc += x
    return acc


def sub(env: Environment, args: LispValue) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    nums = _numbers("-", args)
    if not nums:
        raise EggArityError("- requires at least 1 argument", too_few=True)
    if len(nums) == 1:
        return -nums[0]
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return result


def mul(env: Environment, args: LispValue) -> float:
    result = 1.0
    for x in _numbers("*", args):
        result *= x
    return result


def div(env: Environment, args: LispValue) -> float:
    """Divide left-to-right; with one arg returns the reciprocal.

    Division by zero follows IEEE 754 (Infinity or NaN) rather than failing.
    """
    nums = _numbers("/", args)
    if not nums:
        raise EggArityError("/ requires at least 1 argument", too_few=True)
    if len(nums) == 1:
        nums.insert(0, 1.0)
    result = nums[0]
    for x in nums[1:]:
        result = _ieee_div(result, x)
    return result


def _ieee_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _comparison(name: str, op: Callable[[float, float], bool]) -> Callable[[Environment, LispValue], bool]:
    def compare(env: Environment, args: LispValue) -> bool:
        a, b = _numbers(name, get_args(args, 2, name))
        return op(a, b)
    compare.__name__ = f"compare_{name}"
    return compare


lt = _comparison("<", lambda a, b: a < b)
gt = _comparison(">", lambda a, b: a > b)
num_eq = _comparison("=", lambda a, b: a == b)


# -------------------------------
# Strings
# -------------------------------
def concat(env: Environment, args: LispValue) -> str:
    parts = []
    for x in args:
        if not isinstance(x, str):
            raise EggTypeError(f"Arguments to concat must be strings, got {to_repr(x)}")
        parts.append(x)
    return "".join(parts)


# -------------------------------
# Lists
# -------------------------------
def cons(env: Environment, args: LispValue) -> Pair:
    """Construct a new list by prepending head to an existing list."""
    head, rest = get_args(args, 2, "cons")
    if not is_list(rest):
        raise EggTypeError(f"cons second argument must be a list, got {to_repr(rest)}")
    return Pair(head, rest)


def list_builtin(env: Environment, args: LispValue) -> LispValue:
    # The evaluator already built a fresh list of the evaluated arguments
    return args


def _non_empty(name: str, args: LispValue) -> Pair:
    xs = get_args(args, 1, name)[0]
    if xs is Nil:
        raise EggArgumentError(f"Cannot take {name} of empty list (nil)")
    if not isinstance(xs, Pair):
        raise EggTypeError(f"{name} expects a list, got {to_repr(xs)}")
    return xs


def head(env: Environment, args: LispValue) -> LispValue:
    return _non_empty("head", args).head


def tail(env: Environment, args: LispValue) -> LispValue:
    return _non_empty("tail", args).tail


def is_nil(env: Environment, args: LispValue) -> bool:
    return get_args(args, 1, "nil?")[0] is Nil


# -------------------------------
# Meta-programming and introspection
# -------------------------------
def eval_builtin(env: Environment, args: LispValue) -> LispValue:
    """Evaluate a single value (code as data) in the calling environment."""
    return evaluate0(get_args(args, 1, "eval")[0], env)


def _user_callable(name: str, args: LispValue) -> Closure:
    fn = get_args(args, 1, name)[0]
    if not isinstance(fn, Closure):
        raise EggTypeError(f"{name} expects a function or macro, got {to_repr(fn)}")
    return fn


def body(env: Environment, args: LispValue) -> LispValue:
    return _user_callable("body", args).body


def closure(env: Environment, args: LispValue) -> Environment:
    return _user_callable("closure", args).env


def is_same(env: Environment, args: LispValue) -> bool:
    """Identity, not structural equality."""
    a, b = get_args(args, 2, "is?")
    return a is b


def type_of_builtin(env: Environment, args: LispValue) -> str:
    return type_of(get_args(args, 1, "type-of")[0])


def current_env(env: Environment, args: LispValue) -> Environment:
    get_args(args, 0, "env")
    return env


def global_env(env: Environment, args: LispValue) -> Environment:
    get_args(args, 0, "globals")
    return env.root()


# -------------------------------
# Printing
# -------------------------------
def print_builtin(env: Environment, args: LispValue) -> LispValue:
    """Print arguments space-separated followed by a newline; returns Nil."""
    print(" ".join(to_str(x) for x in args))
    return Nil


def str_builtin(env: Environment, args: LispValue) -> str:
    return to_str(get_args(args, 1, "str")[0])


def repr_builtin(env: Environment, args: LispValue) -> str:
    return to_repr(get_args(args, 1, "repr")[0])


BUILTINS: dict[str, Callable[[Environment, LispValue], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "<": lt,
    ">": gt,
    "=": num_eq,
    "concat": concat,
    "cons": cons,
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "nil?": is_nil,
    "eval": eval_builtin,
    "body": body,
    "closure": closure,
    "is?": is_same,
    "type-of": type_of_builtin,
    "print": print_builtin,
    "str": str_builtin,
    "repr": repr_builtin,
    "env": current_env,
    "globals": global_env,
}


def register(env: Environment) -> None:
    """Register all special forms, builtin functions and constants into the given environment."""
    env.update({Symbol(name): NativeSpecialForm(name, form) for name, form in SPECIAL_FORMS.items()})
    env.update({Symbol(name): NativeFunction(name, fn) for name, fn in BUILTINS.items()})
    env.update(
        {
            Symbol("nil"): Nil,
            Symbol("true"): True,
            Symbol("false"): False,
        }
    )
