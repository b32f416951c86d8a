from __future__ import annotations

from conslisp import EvaluatorFn, LispValue
from conslisp.errors import ArityError
from conslisp.evaluation.apply import evaluate_args, require_numbers
from conslisp.types.context import Context
from conslisp.types.sexp import MaybeSexp


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: MaybeSexp, ctx: Context, evaluate_fn: EvaluatorFn) -> LispValue:
    return sum(require_numbers("+", evaluate_args(args, ctx, evaluate_fn)))


def sub(args: MaybeSexp, ctx: Context, evaluate_fn: EvaluatorFn) -> LispValue:
    values = require_numbers("-", evaluate_args(args, ctx, evaluate_fn))
    if not values:
        raise ArityError("- requires at least 1 argument")
    result = values[0]
    for x in values[1:]:
        result -= x
    return result


# -------------------------------
# Comparison
# -------------------------------
def less_equal(args: MaybeSexp, ctx: Context, evaluate_fn: EvaluatorFn) -> LispValue:
    values = evaluate_args(args, ctx, evaluate_fn)
    if len(values) != 2:
        raise ArityError(f"<= requires exactly 2 arguments, got {len(values)}")
    a, b = require_numbers("<=", values)
    return a <= b


PRIMITIVES = {
    "+": add,
    "-": sub,
    "<=": less_equal,
}
