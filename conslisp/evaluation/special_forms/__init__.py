"""Registry of special forms for the conslisp evaluator.

Maps names to handlers that decide for themselves which of their argument
forms get evaluated. Handlers are called like every other callable value:
handler(args, ctx, evaluate_fn) with `args` unevaluated.
"""

from conslisp.evaluation.special_forms.begin_form import begin_form
from conslisp.evaluation.special_forms.define_form import define_form
from conslisp.evaluation.special_forms.if_form import if_form
from conslisp.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "if": if_form,
    "def": define_form,
    "lambda": lambda_form,
    "begin": begin_form,
}
