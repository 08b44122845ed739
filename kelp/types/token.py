from __future__ import annotations
from enum import Enum


class TokenType(Enum):
    SYMBOL = "symbol"
    STRING = "string"
    LPAREN = "lparen"
    RPAREN = "rparen"
    QUOTE = "quote"
    QUASIQUOTE = "quasiquote"
    UNQUOTE = "unquote"
    SPLICE_UNQUOTE = "splice_unquote"


class Token:
    """A lexical token: the raw source text plus its kind."""

    __slots__ = ("text", "type")

    def __init__(self, text: str, type: TokenType = TokenType.SYMBOL):
        self.text = text
        self.type = type

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Token) and self.text == other.text and self.type == other.type

    def __hash__(self) -> int:
        return hash((self.text, self.type))

    def __repr__(self):
        return f"Token({self.text!r}, {self.type.name})"

    def __str__(self):
        return self.text
