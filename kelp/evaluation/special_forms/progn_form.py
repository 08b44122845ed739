from kelp.evaluation.evaluator import eval_sequence
from kelp.types.environment import Scope
from kelp.types.values import List, Value


def do_form(lst: List, scope: Scope) -> Value:
    return eval_sequence(lst.rest(), scope)
