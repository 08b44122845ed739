"""Runtime values for Kelp.

Every value produced by the reader or the evaluator is one of the variants
below. The set is closed: dispatch sites `match` on these classes, so adding a
variant means revisiting each of them. All variants are immutable, which lets
a Scope hand out bound values without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, Optional, Union

from kelp.types.token import Token, TokenType

if TYPE_CHECKING:
    from kelp.types.environment import Scope


INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class Nil:
    def __str__(self):
        return "nil"


@dataclass(frozen=True)
class Boolean:
    value: bool

    def __str__(self):
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Int:
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Float:
    value: float

    def __str__(self):
        return repr(self.value)


@dataclass(frozen=True)
class String:
    value: str

    def __str__(self):
        # Inverse of the reader's string decoding: only newlines are escaped
        return '"' + self.value.replace("\n", "\\n") + '"'


@dataclass(frozen=True)
class Atom:
    """An unevaluated identifier or string literal, holding its raw token."""

    token: Token

    @property
    def text(self) -> str:
        return self.token.text

    @property
    def kind(self) -> TokenType:
        return self.token.type

    def __str__(self):
        return self.token.text


@dataclass(frozen=True)
class List:
    items: tuple[Value, ...] = ()

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return List(self.items[index])
        return self.items[index]

    def first_token(self) -> Optional[Token]:
        """Token of the head element if it is an Atom, else None."""
        if self.items and isinstance(self.items[0], Atom):
            return self.items[0].token
        return None

    def rest(self) -> tuple[Value, ...]:
        return self.items[1:]

    def __str__(self):
        return "(" + " ".join(str(v) for v in self.items) + ")"


NativeFn = Callable[[List, "Scope"], "Value"]


@dataclass(frozen=True, eq=False)
class Function:
    fn: NativeFn
    name: str = "anonymous"

    def __call__(self, lst: List, scope: Scope) -> Value:
        return self.fn(lst, scope)

    def __str__(self):
        return f"#<function {self.name}>"


@dataclass(frozen=True, eq=False)
class Macro:
    fn: NativeFn
    name: str = "anonymous"

    def __call__(self, lst: List, scope: Scope) -> Value:
        return self.fn(lst, scope)

    def __str__(self):
        return f"#<macro {self.name}>"


@dataclass(frozen=True)
class Error:
    message: str

    def __str__(self):
        return f"error: {self.message}"


Value = Union[Nil, Boolean, Int, Float, String, Atom, List, Function, Macro, Error]

NIL = Nil()
TRUE = Boolean(True)
FALSE = Boolean(False)


def symbol(name: str) -> Atom:
    """Build a symbol Atom, as the reader would for an identifier token."""
    return Atom(Token(name, TokenType.SYMBOL))


def is_truthy(value: Value) -> bool:
    """Only nil and false are false."""
    return not (isinstance(value, Nil) or value == FALSE)


def display(value: Value) -> str:
    """Printed form, with strings rendered as their raw text."""
    if isinstance(value, String):
        return value.value
    return str(value)
