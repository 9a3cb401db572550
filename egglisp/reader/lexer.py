"""
  egglisp lexer

- Streaming, lazy: `lex` is a generator, each call starts over from the top
- Whitespace is emitted as a token so the parser can reject run-on atoms
- `;` line comments are folded into the surrounding whitespace run
- Every token carries the 1-based line/column of its first character
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from egglisp.types.errors import EggSyntaxError


# Order is priority: the first alternative that matches wins.
TOKEN_RE = re.compile(
    r"(?P<whitespace>(?:\s|;[^\n]*)+)"  # whitespace and comments
    r'|(?P<string>"[^"]*")'  # double-quoted strings, no escapes
    r"|(?P<number>(?:\d+(?:\.\d+)?|\.\d+)(?:[eE]\d+)?)"  # unsigned numbers
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # '
    r"|(?P<boolean>#[tf](?![A-Za-z0-9_]))"  # #t #f
    r"|(?P<symbol>[A-Za-z_][A-Za-z_!?*0-9\-]*|[+\-*/<>=!?\\]+)"  # identifiers, operators
)

ATOM_KINDS = frozenset({"string", "number", "symbol", "boolean"})


@dataclass(frozen=True)
class Token:
    kind: str
    value: Optional[str]
    line: int
    column: int


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, value, line, column), then an eof token."""
    pos = 0
    n = len(source)
    line, column = 1, 1

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise EggSyntaxError("Unterminated string", line, column)
            raise EggSyntaxError(f"Unexpected character {source[pos]!r}", line, column)
        kind = m.lastgroup
        text = m.group(kind)
        if kind == "string":
            value = text[1:-1]
        elif kind == "whitespace":
            value = None
        else:
            value = text
        yield Token(kind, value, line, column)

        newlines = text.count("\n")
        if newlines:
            line += newlines
            column = len(text) - text.rfind("\n")
        else:
            column += len(text)
        pos = m.end()

    yield Token("eof", None, line, column)
