import pytest

from egglisp.builtin.env_builtin import register
from egglisp.evaluation.evaluator import evaluate
from egglisp.interpreter import Interpreter
from egglisp.reader.parser import TokenStream
from egglisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded (no prelude)."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Evaluate every expression in a source string in `env`; return the last value."""
    def _run(source):
        stream = TokenStream.from_source(source)
        result = None
        while not stream.at_end():
            result = evaluate(stream.parse_expr(), env)
        return result
    return _run


@pytest.fixture
def interp():
    """Interpreter with the standard library loaded."""
    return Interpreter()
