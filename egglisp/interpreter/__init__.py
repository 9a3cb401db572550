from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterator, Literal

from egglisp import LispValue
from egglisp.builtin.env_builtin import register
from egglisp.evaluation.evaluator import evaluate
from egglisp.reader.parser import TokenStream
from egglisp.types.environment import Environment
from egglisp.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating egglisp code.

    Owns one long-lived global Environment with the builtins installed once,
    and evaluates each top-level expression as soon as it has been parsed, so
    definitions made by one expression are visible to the next. Errors from
    the reader or evaluator propagate to the caller unchanged.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            try:
                # Lazy import to keep the loader out of the core import graph
                from egglisp.modules.prelude_loader import load_prelude
                load_prelude(self)
            except FileNotFoundError:
                logger.warning("No prelude found, starting with builtins only")
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for _ in self.eval_all(code):
            pass

    def eval_all(self, code: str) -> Iterator[LispValue]:
        """Parse and evaluate top-level expressions one at a time, yielding each result."""
        stream = TokenStream.from_source(code)
        while not stream.at_end():
            expr = stream.parse_expr()
            yield evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the last result (Nil if none)."""
        result: LispValue = Nil
        for result in self.eval_all(code):
            pass
        return result

    def load_file(self, path: str | Path) -> LispValue:
        path = Path(path)
        logger.info("Executing %s", path)
        return self.eval(path.read_text(encoding='utf-8'))
