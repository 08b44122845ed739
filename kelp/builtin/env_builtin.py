"""Built-in functions for the Kelp runtime.

This module defines core arithmetic, comparison, list processing, predicates
and string/error helpers, plus the `register` hook that binds them into a
scope. Each builtin takes the calling scope and its already-evaluated
arguments; `applicative` adapts it to the evaluator's (list, scope) calling
convention.
"""
from __future__ import annotations

from typing import Callable, Optional, Sequence

from kelp.evaluation.arity import check_arity, check_min_arity
from kelp.evaluation.evaluator import eval_args, eval_generic
from kelp.types.environment import Scope
from kelp.types.values import (
    Atom, Boolean, Error, Float, Function, Int, List, Macro, Nil, String, Value,
    NIL, TRUE, FALSE, INT_MIN, INT_MAX, display, is_truthy, symbol,
)

Builtin = Callable[[Scope, list[Value]], Value]


def applicative(
    name: str,
    fn: Builtin,
    arity: Optional[int] = None,
    min_arity: Optional[int] = None,
    propagate_errors: bool = True,
) -> Function:
    """Wrap `fn` so its arguments are evaluated before it runs.

    Arity is checked on the call list first, so a miscounted call evaluates
    nothing. With `propagate_errors` (the default) the first Error argument
    is returned and `fn` is not called; predicates on errors opt out.
    """
    def call(lst: List, scope: Scope) -> Value:
        if arity is not None and (err := check_arity(name, arity, lst)) is not None:
            return err
        if min_arity is not None and (err := check_min_arity(name, min_arity, lst)) is not None:
            return err
        if propagate_errors:
            args = eval_args(lst, scope)
            if isinstance(args, Error):
                return args
        else:
            args = [eval_generic(expr, scope) for expr in lst.rest()]
        return fn(scope, args)

    return Function(call, name)


def _bool(flag: bool) -> Boolean:
    return TRUE if flag else FALSE


def _number(n: int | float) -> Value:
    if isinstance(n, int):
        if not INT_MIN <= n <= INT_MAX:
            return Error("integer overflow")
        return Int(n)
    return Float(n)


def _check_numbers(name: str, args: list[Value]) -> Optional[Error]:
    for a in args:
        if not isinstance(a, (Int, Float)):
            return Error(f"{name} expects numbers, got {a}")
    return None


def _truncating_div(a: int | float, b: int | float) -> int | float:
    if isinstance(a, int) and isinstance(b, int):
        q = abs(a) // abs(b)
        return q if (a >= 0) == (b >= 0) else -q
    return a / b


# -------------------------------
# Arithmetic
# -------------------------------
def add(scope: Scope, args: list[Value]) -> Value:
    """Sum of all arguments; (+) is 0."""
    if (err := _check_numbers("+", args)) is not None:
        return err
    return _number(sum((a.value for a in args), 0))


def sub(scope: Scope, args: list[Value]) -> Value:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if (err := _check_numbers("-", args)) is not None:
        return err
    if len(args) == 1:
        return _number(-args[0].value)
    result = args[0].value
    for a in args[1:]:
        result -= a.value
    return _number(result)


def mul(scope: Scope, args: list[Value]) -> Value:
    """Product of all arguments; (*) is 1."""
    if (err := _check_numbers("*", args)) is not None:
        return err
    result = 1
    for a in args:
        result *= a.value
        if isinstance(result, int) and not INT_MIN <= result <= INT_MAX:
            return Error("integer overflow")
    return _number(result)


def div(scope: Scope, args: list[Value]) -> Value:
    """Divide left-to-right, truncating toward zero when both sides are ints.
    With one arg returns the reciprocal."""
    if (err := _check_numbers("/", args)) is not None:
        return err
    values = [a.value for a in args]
    if len(values) == 1:
        values.insert(0, 1)
    result = values[0]
    for v in values[1:]:
        if v == 0:
            return Error("division by zero")
        result = _truncating_div(result, v)
    return _number(result)


def mod(scope: Scope, args: list[Value]) -> Value:
    """(mod n d): remainder with the sign of n. Exactly 2 integer arguments."""
    n, d = args
    if not isinstance(n, Int) or not isinstance(d, Int):
        return Error(f"mod expects integers, got {n} and {d}")
    if d.value == 0:
        return Error("division by zero")
    r = abs(n.value) % abs(d.value)
    return Int(r if n.value >= 0 else -r)


# -------------------------------
# Comparison
# -------------------------------
def is_equal(a: Value, b: Value) -> bool:
    """Numbers compare by value across Int and Float; lists element-wise;
    everything else structurally."""
    if isinstance(a, (Int, Float)) and isinstance(b, (Int, Float)):
        return a.value == b.value
    if isinstance(a, List) and isinstance(b, List):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    return a == b


def equals(scope: Scope, args: list[Value]) -> Value:
    return _bool(all(is_equal(a, b) for a, b in zip(args, args[1:])))


def _comparison(name: str, op: Callable[[int | float, int | float], bool]) -> Builtin:
    def compare(scope: Scope, args: list[Value]) -> Value:
        if (err := _check_numbers(name, args)) is not None:
            return err
        return _bool(all(op(a.value, b.value) for a, b in zip(args, args[1:])))
    return compare


lt = _comparison("<", lambda a, b: a < b)
lte = _comparison("<=", lambda a, b: a <= b)
gt = _comparison(">", lambda a, b: a > b)
gte = _comparison(">=", lambda a, b: a >= b)


def logical_not(scope: Scope, args: list[Value]) -> Value:
    return _bool(not is_truthy(args[0]))


# -------------------------------
# List operations
# -------------------------------
def _as_items(name: str, value: Value) -> tuple[Value, ...] | Error:
    """Lists and nil both read as sequences."""
    if isinstance(value, List):
        return value.items
    if isinstance(value, Nil):
        return ()
    return Error(f"{name} expects a list, got {value}")


def list_builtin(scope: Scope, args: list[Value]) -> Value:
    return List(tuple(args))


def cons(scope: Scope, args: list[Value]) -> Value:
    head, tail = args
    items = _as_items("cons", tail)
    if isinstance(items, Error):
        return items
    return List((head,) + items)


def first(scope: Scope, args: list[Value]) -> Value:
    items = _as_items("first", args[0])
    if isinstance(items, Error):
        return items
    return items[0] if items else NIL


def rest(scope: Scope, args: list[Value]) -> Value:
    items = _as_items("rest", args[0])
    if isinstance(items, Error):
        return items
    return List(items[1:])


def nth(scope: Scope, args: list[Value]) -> Value:
    seq, index = args
    items = _as_items("nth", seq)
    if isinstance(items, Error):
        return items
    if not isinstance(index, Int):
        return Error(f"nth expects an integer index, got {index}")
    if not 0 <= index.value < len(items):
        return Error(f"nth index {index.value} out of range for {seq}")
    return items[index.value]


def count(scope: Scope, args: list[Value]) -> Value:
    if isinstance(args[0], String):
        return Int(len(args[0].value))
    items = _as_items("count", args[0])
    if isinstance(items, Error):
        return items
    return Int(len(items))


def is_empty(scope: Scope, args: list[Value]) -> Value:
    items = _as_items("empty?", args[0])
    if isinstance(items, Error):
        return items
    return _bool(not items)


def concat(scope: Scope, args: list[Value]) -> Value:
    result: list[Value] = []
    for a in args:
        items = _as_items("concat", a)
        if isinstance(items, Error):
            return items
        result.extend(items)
    return List(tuple(result))


# -------------------------------
# Higher-order list operations
# -------------------------------
def call_function(f: Value, args: Sequence[Value], scope: Scope) -> Value:
    """Apply a function value to already-evaluated arguments.

    The arguments are bound in a child scope under names the reader cannot
    produce, so the callee's own argument evaluation returns them unchanged.
    """
    frame = scope.child()
    names: list[Value] = []
    for i, value in enumerate(args):
        name = f" arg{i}"
        frame.set(name, value)
        names.append(symbol(name))
    return f(List((f, *names)), frame)


def _function_and_items(name: str, f: Value, seq: Value) -> tuple[Value, ...] | Error:
    if not isinstance(f, Function):
        return Error(f"{name} expects a function, got {f}")
    return _as_items(name, seq)


def map_builtin(scope: Scope, args: list[Value]) -> Value:
    f, seq = args
    items = _function_and_items("map", f, seq)
    if isinstance(items, Error):
        return items
    result: list[Value] = []
    for x in items:
        value = call_function(f, [x], scope)
        if isinstance(value, Error):
            return value
        result.append(value)
    return List(tuple(result))


def filter_builtin(scope: Scope, args: list[Value]) -> Value:
    pred, seq = args
    items = _function_and_items("filter", pred, seq)
    if isinstance(items, Error):
        return items
    result: list[Value] = []
    for x in items:
        keep = call_function(pred, [x], scope)
        if isinstance(keep, Error):
            return keep
        if is_truthy(keep):
            result.append(x)
    return List(tuple(result))


def reduce_builtin(scope: Scope, args: list[Value]) -> Value:
    """(reduce f init xs): left fold, (f (f init x0) x1) ..."""
    f, acc, seq = args
    items = _function_and_items("reduce", f, seq)
    if isinstance(items, Error):
        return items
    for x in items:
        acc = call_function(f, [acc, x], scope)
        if isinstance(acc, Error):
            return acc
    return acc


# -------------------------------
# Predicates
# -------------------------------
def _predicate(*types: type) -> Builtin:
    def check(scope: Scope, args: list[Value]) -> Value:
        return _bool(isinstance(args[0], types))
    return check


is_nil = _predicate(Nil)
is_list = _predicate(List)
is_symbol = _predicate(Atom)
is_string = _predicate(String)
is_number = _predicate(Int, Float)
is_fn = _predicate(Function)
is_macro = _predicate(Macro)
is_error = _predicate(Error)


# -------------------------------
# Strings and errors
# -------------------------------
def str_builtin(scope: Scope, args: list[Value]) -> Value:
    return String("".join(display(a) for a in args))


def error_builtin(scope: Scope, args: list[Value]) -> Value:
    """(error "message" ...) builds an Error value from the printed args."""
    return Error("".join(display(a) for a in args))


def error_message(scope: Scope, args: list[Value]) -> Value:
    if not isinstance(args[0], Error):
        return Error(f"error-message expects an error, got {args[0]}")
    return String(args[0].message)


# -------------------------------
# Registration
# -------------------------------
BUILTINS = [
    applicative("+", add),
    applicative("-", sub, min_arity=1),
    applicative("*", mul),
    applicative("/", div, min_arity=1),
    applicative("mod", mod, arity=2),
    applicative("=", equals, min_arity=1),
    applicative("<", lt, min_arity=1),
    applicative("<=", lte, min_arity=1),
    applicative(">", gt, min_arity=1),
    applicative(">=", gte, min_arity=1),
    applicative("not", logical_not, arity=1),
    applicative("list", list_builtin),
    applicative("cons", cons, arity=2),
    applicative("first", first, arity=1),
    applicative("rest", rest, arity=1),
    applicative("nth", nth, arity=2),
    applicative("count", count, arity=1),
    applicative("empty?", is_empty, arity=1),
    applicative("concat", concat),
    applicative("map", map_builtin, arity=2),
    applicative("filter", filter_builtin, arity=2),
    applicative("reduce", reduce_builtin, arity=3),
    applicative("nil?", is_nil, arity=1),
    applicative("list?", is_list, arity=1),
    applicative("symbol?", is_symbol, arity=1),
    applicative("string?", is_string, arity=1),
    applicative("number?", is_number, arity=1),
    applicative("fn?", is_fn, arity=1),
    applicative("macro?", is_macro, arity=1),
    applicative("error?", is_error, arity=1, propagate_errors=False),
    applicative("str", str_builtin),
    applicative("error", error_builtin),
    applicative("error-message", error_message, arity=1, propagate_errors=False),
]


def register(scope: Scope) -> None:
    """Bind every builtin function into `scope`."""
    for fn in BUILTINS:
        scope.set(fn.name, fn)
