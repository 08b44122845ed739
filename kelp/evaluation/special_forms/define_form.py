from dataclasses import replace

from kelp.evaluation.arity import check_arity
from kelp.evaluation.evaluator import eval_generic
from kelp.types.environment import Scope
from kelp.types.lambda_fn import Lambda
from kelp.types.token import TokenType
from kelp.types.values import Atom, Error, Function, List, Macro, Value


def define_form(lst: List, scope: Scope) -> Value:
    """
    (def name value)
    Binds in the current scope only, and only once `value` has evaluated
    without error. Returns the bound value.
    """
    if (err := check_arity("def", 2, lst)) is not None:
        return err

    _, name, val_expr = lst
    if not isinstance(name, Atom) or name.kind is not TokenType.SYMBOL:
        return Error(f"def first argument must be a symbol, got {name}")

    value = eval_generic(val_expr, scope)
    if isinstance(value, Error):
        return value

    # Anonymous callables take the name they are first defined under
    if isinstance(value, (Function, Macro)) and value.name == "anonymous":
        fn = value.fn.renamed(name.text) if isinstance(value.fn, Lambda) else value.fn
        value = replace(value, fn=fn, name=name.text)

    scope.set(name.text, value)
    return value
