"""Command-line entry point: runs egglisp scripts and/or an interactive REPL.

    python -m egglisp [-i] [--stack] [--no-prelude] [-v] [scripts ...]
"""

from __future__ import annotations

import argparse
import cmd
import logging
import sys
import traceback

from egglisp import __version__
from egglisp.config import get_log_level
from egglisp.interpreter import Interpreter
from egglisp.printer import to_repr
from egglisp.reader.parser import TokenStream
from egglisp.evaluation.evaluator import evaluate
from egglisp.types.errors import EggError

logger = logging.getLogger("egglisp")


def report(err: Exception, stack: bool) -> None:
    if stack:
        traceback.print_exception(err)
    print(f"{type(err).__name__}: {err}")


class Shell(cmd.Cmd):
    """egglisp read-eval-print loop: one expression per line."""
    intro = f"egglisp v{__version__}\nType an expression, or 'exit' to quit."
    prompt = "egglisp> "

    def __init__(self, interp: Interpreter, stack: bool = False, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interp = interp
        self.stack = stack

    def default(self, line):
        """Evaluates one expression and prints its representation."""
        # cmd.Cmd exits on an uncaught exception, so report and carry on
        try:
            stream = TokenStream.from_source(line)
            expr = stream.parse_expr()
            stream.expect_end()
            print(to_repr(evaluate(expr, self.interp.env)))
        except EggError as err:
            report(err, self.stack)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return True

    def do_exit(self, arg):
        """Exits interpreter."""
        return True


def run_script(interp: Interpreter, filename: str, stack: bool) -> bool:
    try:
        interp.load_file(filename)
    except (EggError, OSError) as err:
        logger.error("Failed to execute %s", filename)
        report(err, stack)
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="egglisp", description=f"egglisp v{__version__}")
    parser.add_argument("-i", "--interactive", action="store_true", help="start the REPL after running scripts")
    parser.add_argument("--stack", action="store_true", help="print stack traces for errors")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the standard library")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("scripts", nargs="*", help="files to execute in order")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    interp = Interpreter(prelude=None if args.no_prelude else 'auto')

    ok = True
    for filename in args.scripts:
        ok = run_script(interp, filename, args.stack) and ok

    if args.interactive or not args.scripts:
        Shell(interp, stack=args.stack).cmdloop()

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
