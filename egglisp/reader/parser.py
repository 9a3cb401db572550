"""
  egglisp reader

Recursive-descent parser over the token stream produced by `lex`. It reads
one expression at a time, so a caller can interleave reading and evaluating:

    - numbers -> float
    - strings -> str
    - #t / #f -> True / False
    - symbols -> Symbol
    - lists   -> Pair chains terminated by Nil, () -> Nil
    - 'expr   -> Quoted(expr)
"""

from __future__ import annotations

from typing import Iterable, Iterator

from egglisp import SExpression
from egglisp.reader.lexer import ATOM_KINDS, Token, lex
from egglisp.types.errors import EggRecursionError, EggSyntaxError
from egglisp.types.nil import Nil
from egglisp.types.pair import Pair
from egglisp.types.quoted import Quoted
from egglisp.types.symbol import Symbol


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.lookahead: Token = next(self.tokens)
        # Last successfully consumed token, for error positions and run-on checks
        self.last: Token | None = None

    @classmethod
    def from_source(cls, source: str) -> TokenStream:
        return cls(lex(source))

    def advance(self) -> Token:
        tok = self.lookahead
        if tok.kind == "eof":
            raise self._error("Unexpected end of input")
        self.lookahead = next(self.tokens)
        self.last = tok
        return tok

    def eat(self, kind: str) -> bool:
        if self.lookahead.kind == kind:
            self.advance()
            return True
        return False

    def expect(self, kind: str) -> Token:
        if self.lookahead.kind != kind:
            if self.lookahead.kind == "eof":
                raise self._error(f"Expected {kind} but input ended")
            tok = self.lookahead
            raise EggSyntaxError(f"Expected {kind} but got {tok.kind}", tok.line, tok.column)
        return self.advance()

    def _error(self, message: str) -> EggSyntaxError:
        pos = self.last or self.lookahead
        return EggSyntaxError(message, pos.line, pos.column)

    def at_end(self) -> bool:
        """True when only trailing whitespace remains."""
        self.eat("whitespace")
        return self.lookahead.kind == "eof"

    def expect_end(self) -> None:
        if not self.at_end():
            tok = self.lookahead
            raise EggSyntaxError("Expected end of input", tok.line, tok.column)

    def parse_expr(self) -> SExpression:
        """Read one expression; nesting deeper than the host stack is an EggRecursionError."""
        try:
            return self.parse_expr0()
        except RecursionError as exc:
            raise EggRecursionError("Maximum nesting depth exceeded while reading") from exc

    def parse_expr0(self) -> SExpression:
        self.eat("whitespace")
        tok = self.lookahead

        if tok.kind == "eof":
            raise self._error("Unexpected end of input")
        if tok.kind == "rparen":
            raise EggSyntaxError("Unexpected ')'", tok.line, tok.column)
        # Two atoms must not touch; a parenthesis or quote may follow an atom
        if tok.kind in ATOM_KINDS and self.last is not None and self.last.kind in ATOM_KINDS:
            raise EggSyntaxError("Expected whitespace between expressions", tok.line, tok.column)

        if tok.kind == "quote":
            self.advance()
            return Quoted(self.parse_expr0())

        if tok.kind == "lparen":
            return self.parse_list()

        self.advance()
        if tok.kind == "number":
            return float(tok.value)
        if tok.kind == "string":
            return tok.value
        if tok.kind == "boolean":
            return tok.value == "#t"
        return Symbol(tok.value)

    def parse_list(self) -> SExpression:
        self.expect("lparen")
        self.eat("whitespace")
        if self.eat("rparen"):
            return Nil
        items = [self.parse_expr0()]
        while not self.eat("rparen"):
            if self.lookahead.kind == "eof":
                raise self._error("Unmatched '('")
            self.expect("whitespace")
            # Whitespace before the closing parenthesis is allowed
            if self.eat("rparen"):
                break
            items.append(self.parse_expr0())
        return Pair.from_iterable(items)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(source: str) -> SExpression:
    """Parse exactly one expression (surrounding whitespace allowed)."""
    stream = TokenStream.from_source(source)
    expr = stream.parse_expr()
    stream.expect_end()
    return expr


def parse_many(source: str) -> list[SExpression]:
    return list(TokenStream.from_source(source).parse_all())
