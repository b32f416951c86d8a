# Core type aliases for the conslisp data model.
# Source code is read into cons cells (Atom / Pair, see conslisp.types.sexp),
# evaluation produces plain Python values:
#
# - Number   -> int (never bool)
# - Boolean  -> bool
# - Callable -> any object called as fn(args, ctx, evaluate_fn), where `args`
#               is the *unevaluated* argument list.

from typing import Any, Callable

# Runtime value alias
LispValue = Any

# Evaluator function type handed to special forms and primitives
EvaluatorFn = Callable[..., LispValue]
