"""Builtin macro transformers for Kelp (implemented in Python).

Each transformer receives the whole, unevaluated call list and returns the
form to evaluate in its place.
"""

from kelp.evaluation.arity import check_min_arity
from kelp.types.environment import Scope
from kelp.types.values import Error, List, Macro, Value, NIL, symbol


def defn_macro(lst: List, scope: Scope) -> Value:
    """(defn name (params) body...) => (def name (fn (params) body...))"""
    if (err := check_min_arity("defn", 2, lst)) is not None:
        return err
    _, name, params, *body = lst.items
    return List((symbol("def"), name, List((symbol("fn"), params, *body))))


def defmacro_macro(lst: List, scope: Scope) -> Value:
    """(defmacro name (params) body...) => (def name (macro (params) body...))"""
    if (err := check_min_arity("defmacro", 2, lst)) is not None:
        return err
    _, name, params, *body = lst.items
    return List((symbol("def"), name, List((symbol("macro"), params, *body))))


def when_macro(lst: List, scope: Scope) -> Value:
    """(when test body...) => (if test (do body...))"""
    if (err := check_min_arity("when", 1, lst)) is not None:
        return err
    _, test, *body = lst.items
    return List((symbol("if"), test, List((symbol("do"), *body))))


def unless_macro(lst: List, scope: Scope) -> Value:
    """(unless test body...) => (if test nil (do body...))"""
    if (err := check_min_arity("unless", 1, lst)) is not None:
        return err
    _, test, *body = lst.items
    return List((symbol("if"), test, NIL, List((symbol("do"), *body))))


def cond_macro(lst: List, scope: Scope) -> Value:
    """
    (cond t1 e1 t2 e2 ...) => (if t1 e1 (cond t2 e2 ...))
    Base case with no clauses => nil
    """
    clauses = lst.rest()
    if len(clauses) % 2 != 0:
        return Error("cond requires an even number of forms")
    if not clauses:
        return NIL
    test, expr, *more = clauses
    return List((symbol("if"), test, expr, List((symbol("cond"), *more))))


BUILTIN_MACROS = [
    Macro(defn_macro, "defn"),
    Macro(defmacro_macro, "defmacro"),
    Macro(when_macro, "when"),
    Macro(unless_macro, "unless"),
    Macro(cond_macro, "cond"),
]


def register(scope: Scope) -> None:
    """Bind the builtin macros into `scope`."""
    for m in BUILTIN_MACROS:
        scope.set(m.name, m)
