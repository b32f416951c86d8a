"""
  Recursive-descent parser

Builds cons-cell trees from the token list produced by the lexer. Every form
must be fully parenthesized; a bare atom at top level is a ParseError.

    parse(tokens, cursor)  -> (index of the closing ')', list or Nil)
    parse_program(tokens)  -> (begin <form1> <form2> ...)
"""

from __future__ import annotations

import logging

from conslisp import config
from conslisp.errors import ParseError
from conslisp.types.nil import Nil
from conslisp.types.sexp import BEGIN, Atom, MaybeSexp, Pair, append
from conslisp.types.token import Token

logger = logging.getLogger(__name__)


def parse(tokens: list[Token], cursor: int) -> tuple[int, MaybeSexp]:
    if cursor >= len(tokens):
        raise ParseError("Expected opening parenthesis, got end of input")
    if tokens[cursor].value != "(":
        raise ParseError(f"Expected opening parenthesis, got '{tokens[cursor].value}'")

    siblings: MaybeSexp = Nil
    cursor += 1
    while cursor < len(tokens):
        tok = tokens[cursor]
        if tok.value == "(":
            cursor, child = parse(tokens, cursor)
            if not child:
                raise ParseError("Expected child.")
            siblings = append(siblings, child)
        elif tok.value == ")":
            return cursor, siblings
        else:
            siblings = append(siblings, Atom(tok))
        cursor += 1

    # Ran out of tokens before the matching ')'
    if not config.lenient_parse():
        raise ParseError("Unterminated form: expected closing parenthesis")
    return cursor, siblings


def parse_program(tokens: list[Token]) -> Pair:
    """Parse every top-level form and wrap them in one implicit `begin`."""
    if not tokens:
        raise ParseError("Empty program")

    program: Pair = append(BEGIN, Nil)
    cursor = -1
    count = 0
    while cursor < len(tokens) - 1:
        cursor, child = parse(tokens, cursor + 1)
        if not child:
            raise ParseError("Empty top-level form")
        program = append(program, child)
        count += 1

    logger.debug("parsed %d top-level forms", count)
    return program
