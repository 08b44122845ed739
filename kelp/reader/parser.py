"""
  Kelp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Value trees and leaves all interpretation to the evaluator:

    - identifiers and numbers -> Atom(SYMBOL token); the evaluator decides
      whether `42`, `nil` or `x` is a literal or a name
    - strings -> Atom(STRING token) holding the raw text, quotes included
    - lists -> List
    - 'x `x ,x ,@x -> (quote x) (quasiquote x) (unquote x) (unquote-splicing x)
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from kelp.errors import KelpSyntaxError
from kelp.types.token import Token, TokenType
from kelp.types.values import Atom, List, Value, symbol


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<splice_unquote>,@)"  # ,@
    r"|(?P<unquote>,)"  # ,
    r"|(?P<quote>')"  # '
    r"|(?P<quasiquote>`)"  # `
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>"(?:\\.|[^\\"])*)'  # string missing its closing quote
    r"|(?P<symbol>[^\s()'`\",;]+)"  # fallback: symbols and numbers
)

QUOTE_FORMS: dict[TokenType, str] = {
    TokenType.QUOTE: "quote",
    TokenType.QUASIQUOTE: "quasiquote",
    TokenType.UNQUOTE: "unquote",
    TokenType.SPLICE_UNQUOTE: "unquote-splicing",
}


def lex(source: str) -> Iterator[Token]:
    """Token generator; whitespace and comments are skipped."""
    pos = 0
    n = len(source)

    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue

        m = TOKEN_RE.match(source, pos)
        if not m:
            raise KelpSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()

        kind = m.lastgroup
        if kind == "comment":
            continue
        if kind == "unterminated":
            raise KelpSyntaxError(f"Unterminated string starting at {m.start()}")
        yield Token(m.group(kind), TokenType(kind))


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> Optional[Value]:
        """Parse the next form, or return None at end of input."""
        tok = self.peek()
        if tok is None:
            return None

        if tok.type in (TokenType.SYMBOL, TokenType.STRING):
            self.advance()
            return Atom(tok)

        # Quote prefixes wrap the following form
        if tok.type in QUOTE_FORMS:
            self.advance()
            expr = self.parse_expr()
            if expr is None:
                raise KelpSyntaxError(f"Expected a form after {tok.text!r}")
            return List((symbol(QUOTE_FORMS[tok.type]), expr))

        if tok.type is TokenType.LPAREN:
            self.advance()
            items: list[Value] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise KelpSyntaxError("Unmatched '('")
                if nxt.type is TokenType.RPAREN:
                    self.advance()
                    break
                items.append(self.parse_expr())
            return List(tuple(items))

        if tok.type is TokenType.RPAREN:
            raise KelpSyntaxError("Unexpected ')'")

        raise KelpSyntaxError(f"Unknown token: {tok!r}")

    def parse_all(self) -> Iterator[Value]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read_str(source: str) -> list[Value]:
    """Read every form in `source`."""
    return list(TokenStream(lex(source)).parse_all())
