from conslisp import EvaluatorFn, LispValue
from conslisp.errors import MalformedFormError
from conslisp.types.context import Context
from conslisp.types.lambda_fn import Lambda
from conslisp.types.sexp import MaybeSexp, Pair


def lambda_form(args: MaybeSexp, ctx: Context, evaluate_fn: EvaluatorFn) -> LispValue:
    # (lambda (params) body...): nothing is evaluated until the function is
    # called; the body forms run as an implicit begin.
    if not isinstance(args, Pair):
        raise MalformedFormError("lambda requires a parameter list")
    return Lambda(args.first, args.second)
