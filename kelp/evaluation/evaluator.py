"""Core evaluator for the Kelp interpreter.

Three mutually recursive routines do all the work:

- eval_generic: head-position macro expansion, then dispatch on value shape.
- eval_list: evaluate the operator and hand the *unevaluated* list to it.
- eval_symbol: string literals, scope lookup, then literal fallback.

Errors are values. Nothing here raises for a language-level problem; the
only fault that escapes is RecursionError on unbounded nesting or a macro
that expands to itself, which is left to the host.
"""

from __future__ import annotations

import logging
import re

from kelp.types.environment import Scope
from kelp.types.token import TokenType
from kelp.types.values import (
    Atom, Error, Function, Int, Float, List, Macro, String, Value,
    NIL, TRUE, FALSE, INT_MIN, INT_MAX,
)

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def eval_generic(value: Value, scope: Scope) -> Value:
    """Evaluate any value under `scope`."""
    # Head-position macro expansion; the expansion is evaluated in turn
    if isinstance(value, List):
        token = value.first_token()
        if token is not None and token.type is TokenType.SYMBOL:
            bound = scope.get(token.text)
            if isinstance(bound, Macro):
                logger.debug("expanding macro %s: %s", token.text, value)
                expansion = bound(value, scope)
                return eval_generic(expansion, scope)

    match value:
        case List():
            return eval_list(value, scope)
        case Atom():
            return eval_symbol(value, scope)
        case _:
            return value


def eval_list(lst: List, scope: Scope) -> Value:
    """Apply the head of `lst` to the whole, unevaluated list."""
    if len(lst) == 0:
        return NIL

    op = eval_generic(lst[0], scope)

    match op:
        case Function():
            return op(lst, scope)
        case Error():
            return op
        case _:
            return Error(f"cannot evaluate list: {lst}")


def convert_string(text: str) -> Value:
    """Decode a raw string token. Only the `\\n` escape is recognized."""
    if len(text) < 2 or not text.startswith('"') or not text.endswith('"'):
        return Error("malformatted string")
    return String(text[1:-1].replace("\\n", "\n"))


def parse_literal(text: str) -> Value:
    """Interpret unbound symbol text as nil, a boolean, an integer or a float."""
    match text:
        case "nil":
            return NIL
        case "true":
            return TRUE
        case "false":
            return FALSE

    # out of range integers fall through to the float parse; more than 19
    # significant digits is always out of range, so int() never sees them
    if _INT_RE.fullmatch(text):
        digits = text.lstrip("+-").lstrip("0") or "0"
        if len(digits) <= 19:
            n = -int(digits) if text.startswith("-") else int(digits)
            if INT_MIN <= n <= INT_MAX:
                return Int(n)
    if _FLOAT_RE.fullmatch(text):
        return Float(float(text))
    return Error(f"could not parse symbol: {text}")


def eval_symbol(atom: Atom, scope: Scope) -> Value:
    if atom.kind is TokenType.STRING:
        return convert_string(atom.text)

    # Bound names win over literals, so `true` or `1` can be redefined
    bound = scope.get(atom.text)
    if bound is not None:
        return bound

    return parse_literal(atom.text)


def eval_args(lst: List, scope: Scope) -> list[Value] | Error:
    """Evaluate the arguments of a call left to right.

    Stops at the first Error and returns it, so later arguments are never
    evaluated once one has failed.
    """
    args: list[Value] = []
    for expr in lst.rest():
        val = eval_generic(expr, scope)
        if isinstance(val, Error):
            return val
        args.append(val)
    return args


def eval_sequence(exprs, scope: Scope) -> Value:
    """Evaluate `exprs` in order and return the last result (nil if empty).

    An Error stops the sequence; the remaining forms are not evaluated.
    """
    result: Value = NIL
    for expr in exprs:
        result = eval_generic(expr, scope)
        if isinstance(result, Error):
            return result
    return result
