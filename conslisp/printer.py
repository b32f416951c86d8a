# Printer for evaluated conslisp values.

from __future__ import annotations

from conslisp import LispValue
from conslisp.evaluation.evaluator import BUILTINS
from conslisp.types.lambda_fn import Lambda

_BUILTIN_NAMES = {fn: name for name, fn in BUILTINS.items()}


def to_string(value: LispValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Lambda):
        return str(value)
    if value in _BUILTIN_NAMES:
        return f"#<builtin {_BUILTIN_NAMES[value]}>"
    return str(value)
