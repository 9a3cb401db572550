# Core type aliases for the egglisp data model.
# Values are a closed set of Python types: Nil, bool, float, str, Symbol, Pair,
# Quoted, the native callables, Closure/Macro and Environment. Code and data
# share this representation (code-as-data).
#
# Naming guidance:
# - SExpression: Use in reader/parser/macro code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (code is data, so this is the same set of values)
SExpression = LispValue

# Evaluator function type: Python evaluator handed to special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
