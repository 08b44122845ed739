from kelp.evaluation.evaluator import eval_generic
from kelp.types.environment import Scope
from kelp.types.values import Error, List, Value, TRUE, FALSE, is_truthy


def and_form(lst: List, scope: Scope) -> Value:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a falsey value
    (nil or false) is found, which is returned immediately. If all operands are
    truthy, returns the value of the last operand. With zero operands, returns
    true. An Error stops evaluation and is returned.
    """
    result: Value = TRUE
    for expr in lst.rest():
        result = eval_generic(expr, scope)
        if isinstance(result, Error) or not is_truthy(result):
            return result
    return result


def or_form(lst: List, scope: Scope) -> Value:
    """Short-circuiting logical OR special form.

    (or a b c ...) returns the first truthy operand, or false if there is
    none. An Error stops evaluation and is returned.
    """
    for expr in lst.rest():
        val = eval_generic(expr, scope)
        if isinstance(val, Error) or is_truthy(val):
            return val
    return FALSE
