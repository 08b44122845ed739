from kelp.evaluation.arity import check_arity
from kelp.evaluation.evaluator import eval_generic
from kelp.types.environment import Scope
from kelp.types.values import Error, List, Value


def eval_form(lst: List, scope: Scope) -> Value:
    """(eval expr): evaluate expr, then evaluate the resulting form."""
    if (err := check_arity("eval", 1, lst)) is not None:
        return err
    form = eval_generic(lst[1], scope)
    if isinstance(form, Error):
        return form
    return eval_generic(form, scope)
