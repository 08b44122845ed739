from kelp.evaluation.arity import check_min_arity
from kelp.evaluation.evaluator import eval_generic, eval_sequence
from kelp.types.environment import Scope
from kelp.types.token import TokenType
from kelp.types.values import Atom, Error, List, Value


def let_form(lst: List, scope: Scope) -> Value:
    """
    (let ((var1 val1) (var2 val2) ...) body...)

    Bindings are made one at a time in a child scope, so later values can
    refer to earlier names. The body is an implicit `do`.
    """
    if (err := check_min_arity("let", 1, lst)) is not None:
        return err

    bindings = lst[1]
    if not isinstance(bindings, List):
        return Error(f"let bindings must be a list, got {bindings}")

    frame = scope.child()
    for b in bindings:
        if not isinstance(b, List) or len(b) != 2:
            return Error(f"let binding must be a list of two elements, got {b}")
        var, val_expr = b
        if not isinstance(var, Atom) or var.kind is not TokenType.SYMBOL:
            return Error(f"let binding name must be a symbol, got {var}")
        value = eval_generic(val_expr, frame)
        if isinstance(value, Error):
            return value
        frame.set(var.text, value)

    return eval_sequence(lst.items[2:], frame)
