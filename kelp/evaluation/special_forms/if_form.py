from kelp.evaluation.arity import check_min_arity
from kelp.evaluation.evaluator import eval_generic
from kelp.types.environment import Scope
from kelp.types.values import Error, List, Value, NIL, is_truthy


def if_form(lst: List, scope: Scope) -> Value:
    """(if cond then [else]); only nil and false select the else branch."""
    if (err := check_min_arity("if", 2, lst)) is not None:
        return err
    if len(lst) > 4:
        return Error(f"if takes at most 3 args, got {len(lst) - 1}")

    cond = eval_generic(lst[1], scope)
    if isinstance(cond, Error):
        return cond

    if is_truthy(cond):
        return eval_generic(lst[2], scope)
    elif len(lst) > 3:
        return eval_generic(lst[3], scope)
    else:
        return NIL
