from kelp.types.token import Token, TokenType
from kelp.types.values import (
    Value, Nil, Boolean, Int, Float, String, Atom, List, Function, Macro, Error,
    NIL, TRUE, FALSE, symbol, is_truthy, display,
)
from kelp.types.environment import Scope
