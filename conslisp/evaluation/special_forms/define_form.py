import logging

from conslisp import EvaluatorFn, LispValue
from conslisp.errors import MalformedFormError
from conslisp.types.context import Context
from conslisp.types.sexp import Atom, MaybeSexp, Pair

logger = logging.getLogger(__name__)


def define_form(args: MaybeSexp, ctx: Context, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (def name body)
    Evaluates body once and binds the result in `ctx` itself, so later forms
    evaluated in the same context see it. Returns the bound value.
    """
    if not (isinstance(args, Pair) and isinstance(args.first, Atom)):
        raise MalformedFormError("Expected a function name.")
    if not isinstance(args.second, Pair):
        raise MalformedFormError("Expected a function body.")

    name = args.first.value
    value = evaluate_fn(args.second.first, ctx)
    ctx.define(name, value)
    logger.debug("def %s = %r", name, value)
    return value
