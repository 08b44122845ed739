from kelp.evaluation.arity import check_arity
from kelp.evaluation.evaluator import eval_generic
from kelp.types.environment import Scope
from kelp.types.token import TokenType
from kelp.types.values import Atom, Error, List, Value


def _is_form(expr: Value, name: str) -> bool:
    return (
        isinstance(expr, List)
        and len(expr) > 0
        and isinstance(expr[0], Atom)
        and expr[0].kind is TokenType.SYMBOL
        and expr[0].text == name
    )


def eval_quasiquote(expr: Value, scope: Scope) -> Value:
    """Build the template `expr`, evaluating unquoted parts in `scope`."""
    if not isinstance(expr, List):
        return expr

    if _is_form(expr, "unquote"):
        if (err := check_arity("unquote", 1, expr)) is not None:
            return err
        return eval_generic(expr[1], scope)

    result: list[Value] = []
    for item in expr:
        if _is_form(item, "unquote-splicing"):
            if (err := check_arity("unquote-splicing", 1, item)) is not None:
                return err
            spliced = eval_generic(item[1], scope)
            if isinstance(spliced, Error):
                return spliced
            if not isinstance(spliced, List):
                return Error(f"unquote-splicing expects a list, got {spliced}")
            result.extend(spliced)
            continue
        val = eval_quasiquote(item, scope)
        if isinstance(val, Error):
            return val
        result.append(val)
    return List(result)


def quote_form(lst: List, scope: Scope) -> Value:
    if (err := check_arity("quote", 1, lst)) is not None:
        return err
    return lst[1]


def quasiquote_form(lst: List, scope: Scope) -> Value:
    if (err := check_arity("quasiquote", 1, lst)) is not None:
        return err
    return eval_quasiquote(lst[1], scope)


def unquote_form(lst: List, scope: Scope) -> Value:
    return Error("unquote not valid outside of quasiquote")


def unquote_splice_form(lst: List, scope: Scope) -> Value:
    return Error("unquote-splicing not valid outside of quasiquote")
