from kelp.evaluation.arity import check_min_arity
from kelp.types.environment import Scope
from kelp.types.lambda_fn import Lambda, MacroLambda, parse_params
from kelp.types.values import Error, Function, List, Macro, Value


def lambda_form(lst: List, scope: Scope) -> Value:
    """(fn (params...) body...) -> a Function closing over `scope`.

    The body is an implicit `do`; with no body forms the function returns nil.
    """
    if (err := check_min_arity("fn", 1, lst)) is not None:
        return err
    parsed = parse_params(lst[1])
    if isinstance(parsed, Error):
        return parsed
    params, rest = parsed
    return Function(Lambda(params, lst.items[2:], scope, rest))


def macro_form(lst: List, scope: Scope) -> Value:
    """(macro (params...) body...) -> a Macro closing over `scope`.

    Parameters are bound to the unevaluated arguments of the call site and
    the body's result is evaluated again in place of the call.
    """
    if (err := check_min_arity("macro", 1, lst)) is not None:
        return err
    parsed = parse_params(lst[1])
    if isinstance(parsed, Error):
        return parsed
    params, rest = parsed
    return Macro(MacroLambda(params, lst.items[2:], scope, rest))
