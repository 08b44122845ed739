"""Special forms for the Kelp evaluator.

Special forms are ordinary Function values that receive the unevaluated call
list and decide for themselves what to evaluate. They are bound into the
native registry scope like every other builtin; the evaluator has no
hard-coded syntax.
"""

from kelp.types.values import Function
from kelp.evaluation.special_forms.define_form import define_form
from kelp.evaluation.special_forms.if_form import if_form
from kelp.evaluation.special_forms.progn_form import do_form
from kelp.evaluation.special_forms.let_form import let_form
from kelp.evaluation.special_forms.lambda_form import lambda_form, macro_form
from kelp.evaluation.special_forms.quote_forms import quote_form, quasiquote_form, unquote_form, unquote_splice_form
from kelp.evaluation.special_forms.logic_forms import and_form, or_form
from kelp.evaluation.special_forms.eval_form import eval_form

SPECIAL_FORMS = {
    name: Function(form, name)
    for name, form in {
        "def": define_form,
        "if": if_form,
        "do": do_form,
        "let": let_form,
        "fn": lambda_form,
        "macro": macro_form,
        "quote": quote_form,
        "quasiquote": quasiquote_form,
        "unquote": unquote_form,
        "unquote-splicing": unquote_splice_form,
        "and": and_form,
        "or": or_form,
        "eval": eval_form,
    }.items()
}
