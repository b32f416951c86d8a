from __future__ import annotations

import logging

from conslisp import LispValue
from conslisp.errors import ParseError, RecursionDepthError
from conslisp.evaluation.evaluator import evaluate
from conslisp.reader.lexer import lex
from conslisp.reader.parser import parse_program
from conslisp.types.context import Context

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Runs conslisp programs: lex -> parse -> evaluate.
    The root Context is kept across calls, so definitions made by one
    program are visible to the next.
    """

    def __init__(self, context: Context | None = None):
        self.context: Context = context if context is not None else Context()

    def read(self, source: str):
        """Parse `source` into a single (begin ...) form without evaluating it."""
        try:
            return parse_program(lex(source))
        except RecursionError:
            raise ParseError("Forms nested too deeply") from None

    def run(self, source: str) -> LispValue:
        program = self.read(source)
        try:
            result = evaluate(program, self.context)
        except RecursionError:
            raise RecursionDepthError("Recursion too deep") from None
        logger.debug("result %r", result)
        return result
