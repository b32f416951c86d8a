from conslisp import EvaluatorFn, LispValue
from conslisp.errors import MalformedFormError
from conslisp.evaluation.apply import is_truthy
from conslisp.types.context import Context
from conslisp.types.sexp import MaybeSexp, Pair


def if_form(args: MaybeSexp, ctx: Context, evaluate_fn: EvaluatorFn) -> LispValue:
    """(if test then else); only the selected branch is evaluated."""
    if not isinstance(args, Pair):
        raise MalformedFormError("Expected a test expression")
    if not isinstance(args.second, Pair):
        raise MalformedFormError("Expected a true-branch")
    if not isinstance(args.second.second, Pair):
        raise MalformedFormError("Expected a false-branch")

    if is_truthy(evaluate_fn(args.first, ctx)):
        return evaluate_fn(args.second.first, ctx)
    return evaluate_fn(args.second.second.first, ctx)
