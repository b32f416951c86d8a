class ConsLispError(Exception):
    """ Base class for all conslisp errors"""
    pass


class LexError(ConsLispError):
    """ Raised when no token rule matches the input at some offset"""

    def __init__(self, offset: int, remainder: str):
        super().__init__(f"Unknown token near '{remainder}' at index '{offset}'")
        self.offset = offset
        self.remainder = remainder


class ParseError(ConsLispError):
    """ Raised when the token stream does not form parenthesized expressions"""


class EvalError(ConsLispError):
    """ Base class for failures raised while evaluating a tree"""


class UnboundSymbolError(EvalError):
    """ Raised when an identifier is bound neither in the context nor as a builtin"""

    def __init__(self, name: str):
        super().__init__(f"Undefined value: {name}")
        self.name = name


class NotCallableError(EvalError):
    """ Raised when the head of a call does not evaluate to a callable"""


class MalformedFormError(EvalError):
    """ Raised when a form or argument list does not have the required shape"""


class ArityError(EvalError):
    """ Raised when the number of arguments passed to a builtin is incorrect"""


class LispTypeError(EvalError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""


class RecursionDepthError(EvalError):
    """ Raised when a program nests or recurses deeper than the interpreter allows"""
