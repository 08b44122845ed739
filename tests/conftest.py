import pytest

from kelp.builtin import create_root_scope
from kelp.interpreter import Interpreter
from kelp.types import Atom, Scope, Token, TokenType


def atom(text: str, kind: TokenType = TokenType.SYMBOL) -> Atom:
    return Atom(Token(text, kind))


@pytest.fixture
def scope():
    """An empty scope with no natives bound."""
    return Scope()


@pytest.fixture
def root():
    """A session scope over the native registry."""
    return create_root_scope()


@pytest.fixture
def interp():
    return Interpreter(prelude=None)
