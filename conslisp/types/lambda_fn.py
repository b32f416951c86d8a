"""User-defined functions created by the `lambda` special form."""

from __future__ import annotations

import logging
from io import StringIO

from conslisp import EvaluatorFn, LispValue
from conslisp.errors import MalformedFormError
from conslisp.evaluation.apply import evaluate_args
from conslisp.types.context import Context
from conslisp.types.nil import Nil
from conslisp.types.sexp import BEGIN, Atom, MaybeSexp, Pair, append, to_source

logger = logging.getLogger(__name__)


class Lambda:
    """A first-class function holding its unevaluated parameter list and body.

    No environment is captured: each call runs in a snapshot of the *calling*
    context extended with the parameter bindings.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: MaybeSexp, body: MaybeSexp):
        self.params: MaybeSexp = params
        self.body: MaybeSexp = body

    def __call__(self, args: MaybeSexp, ctx: Context, evaluate_fn: EvaluatorFn) -> LispValue:
        values = evaluate_args(args, ctx, evaluate_fn)
        call_ctx = ctx.derive(self.bind(values))
        logger.debug("calling %s with %r", self, values)
        return evaluate_fn(append(BEGIN, self.body), call_ctx)

    def bind(self, values: list[LispValue]) -> dict[str, LispValue]:
        """Pair parameters with argument values by position.

        Missing arguments are bound to Nil and extra arguments are dropped.
        """
        bindings: dict[str, LispValue] = {}
        current = self.params
        i = 0
        while current:
            if not (isinstance(current, Pair) and isinstance(current.first, Atom)):
                raise MalformedFormError("Expected argument list.")
            bindings[current.first.value] = values[i] if i < len(values) else Nil
            i += 1
            current = current.second
        return bindings

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<lambda ")
            buffer.write(to_source(self.params) if self.params else "()")
            buffer.write(">")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
