from conslisp import EvaluatorFn, LispValue
from conslisp.errors import MalformedFormError
from conslisp.types.context import Context
from conslisp.types.sexp import MaybeSexp, iter_list


def begin_form(args: MaybeSexp, ctx: Context, evaluate_fn: EvaluatorFn) -> LispValue:
    forms = list(iter_list(args))
    if not forms:
        raise MalformedFormError("begin requires at least one form")
    for form in forms[:-1]:
        evaluate_fn(form, ctx)
    return evaluate_fn(forms[-1], ctx)
