"""Registry of special forms for the Sprig evaluator.

Maps names to handlers that receive their argument nodes unevaluated. They
are registered into the base environment as ordinary Function values, so the
evaluator needs no separate special-form table: any primitive may choose
which of its arguments to evaluate.
"""

from sprig.evaluation.special_forms.progn_form import begin_form
from sprig.evaluation.special_forms.quote_forms import quote_form
from sprig.evaluation.special_forms.lambda_form import lambda_form
from sprig.evaluation.special_forms.define_form import define_form
from sprig.evaluation.special_forms.if_form import if_form
from sprig.evaluation.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    "begin": begin_form,
    "quote": quote_form,
    "lambda": lambda_form,
    "define": define_form,
    "set!": define_form,
    "if": if_form,
    "and": and_form,
    "or": or_form,
}
