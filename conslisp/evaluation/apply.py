"""Argument handling shared by the evaluator, special forms and primitives."""

from __future__ import annotations

from conslisp import EvaluatorFn, LispValue
from conslisp.errors import LispTypeError
from conslisp.types.context import Context
from conslisp.types.nil import Nil
from conslisp.types.sexp import MaybeSexp, iter_list


def evaluate_args(args: MaybeSexp, ctx: Context, evaluate_fn: EvaluatorFn) -> list[LispValue]:
    """Evaluate each element of the argument list `args` left to right under `ctx`."""
    return [evaluate_fn(arg, ctx) for arg in iter_list(args)]


def is_number(value: LispValue) -> bool:
    # bool is a subclass of int; Booleans are not Numbers here
    return isinstance(value, int) and not isinstance(value, bool)


def require_numbers(name: str, values: list[LispValue]) -> list[LispValue]:
    for value in values:
        if not is_number(value):
            raise LispTypeError(f"{name} expects number arguments.")
    return values


def is_truthy(value: LispValue) -> bool:
    """0, false and NIL are falsy; everything else is true."""
    if value is False or value is Nil:
        return False
    if is_number(value):
        return value != 0
    return True
