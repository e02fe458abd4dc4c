"""
  lithp Reader: Lexer and Parser

- Streaming, lazy parsing
- Emits plain Python values:

    - lists -> Python list
    - numbers -> float (anything float() accepts, except with underscores)
    - everything else -> Symbol
    - 'expr -> [Symbol("quote"), expr]
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from lithp import Expression
from lithp.errors import LithpSyntaxError
from lithp.types.symbol import Symbol

QUOTE = Symbol("quote")

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # quote shorthand
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s();']+)"  # symbols and numbers
    r")",
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            # Only trailing whitespace left
            if source[pos:].isspace():
                break
            raise LithpSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("quote", "lparen", "rparen", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


def atom(token: str) -> Expression:
    """Number if `token` reads as a 64-bit float, else a Symbol."""
    if "_" in token:
        return Symbol(token)
    try:
        return float(token)
    except ValueError:
        return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Expression:
        """Read one expression; None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None
        return self._read()

    def _read(self) -> Expression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise LithpSyntaxError("Unexpected EOF")

        if tok_type == "symbol":
            return atom(tok_val)

        if tok_type == "quote":
            return [QUOTE, self._read()]

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise LithpSyntaxError("Unexpected EOF")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self._read())

        if tok_type == "rparen":
            raise LithpSyntaxError("Unexpected ')'")

        raise LithpSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[Expression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> Expression:
    """Read the first expression in `source`; the rest of the input is ignored."""
    expr = TokenStream(lex(source)).parse_expr()
    if expr is None:
        raise LithpSyntaxError("Unexpected EOF")
    return expr


def parse_all(source: str) -> list[Expression]:
    return list(TokenStream(lex(source)).parse_all())
