"""Core evaluator for conslisp.

Walks a cons-cell tree recursively. Identifiers resolve against the Context
chain first and then against the fixed builtin table, so a `def` can shadow a
builtin. A call evaluates its head to a callable and hands it the
*unevaluated* argument list; each callable decides what to evaluate.
"""

from __future__ import annotations

from types import MappingProxyType

from conslisp import LispValue
from conslisp.builtins import PRIMITIVES
from conslisp.errors import MalformedFormError, NotCallableError, UnboundSymbolError
from conslisp.evaluation.apply import is_truthy
from conslisp.evaluation.special_forms import SPECIAL_FORMS
from conslisp.types.context import Context
from conslisp.types.nil import Nil, NilType
from conslisp.types.sexp import Atom, MaybeSexp, Pair, pretty
from conslisp.types.token import TokenKind

# Read-only; never stored in a Context
BUILTINS = MappingProxyType({**SPECIAL_FORMS, **PRIMITIVES})


def resolve(name: str, ctx: Context) -> LispValue:
    value = ctx.lookup(name)
    if value is not Nil:
        return value
    builtin = BUILTINS.get(name)
    if builtin is None:
        raise UnboundSymbolError(name)
    return builtin


def evaluate(expr: MaybeSexp, ctx: Context) -> LispValue:
    """Evaluate `expr` under `ctx` and return its value."""
    if isinstance(expr, Atom):
        if expr.token.kind is TokenKind.INTEGER:
            return int(expr.value)
        return resolve(expr.value, ctx)

    if not isinstance(expr, Pair):
        raise MalformedFormError(f"Cannot evaluate {pretty(expr)}")

    fn = evaluate(expr.first, ctx)
    if not is_truthy(fn):
        raise NotCallableError(f"Unknown function: {pretty(expr.first)}")
    if not callable(fn):
        raise NotCallableError(f"Not a function: {pretty(expr.first)}")

    args = expr.second
    # Nil is the empty argument list, as in (+)
    if not isinstance(args, (Pair, NilType)):
        raise MalformedFormError(f"Not a linked list: {pretty(args)}")
    return fn(args, ctx, evaluate)
