"""
  Lexer

Turns program text into a flat list of Tokens. At each position the rules are
tried in order (syntax character, integer, identifier); the first rule that
consumes at least one character wins. Integer and identifier scans are
maximal-munch and never backtrack into each other.
"""

from __future__ import annotations

import logging
import string
from typing import Callable, Optional

from conslisp.errors import LexError
from conslisp.types.token import Token, TokenKind

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\n\r")
SYNTAX_CHARS = frozenset("()")
DIGITS = frozenset(string.digits)
OPERATOR_CHARS = frozenset("+-*&$%<=")
IDENTIFIER_START = frozenset(string.ascii_letters) | OPERATOR_CHARS
IDENTIFIER_REST = IDENTIFIER_START | DIGITS

# A scanner returns (new_cursor, token); new_cursor == cursor means no match.
Scanner = Callable[[str, int], tuple[int, Optional[Token]]]


def lex_syntax(source: str, cursor: int) -> tuple[int, Optional[Token]]:
    if source[cursor] in SYNTAX_CHARS:
        return cursor + 1, Token(source[cursor], TokenKind.SYNTAX)
    return cursor, None


def lex_integer(source: str, cursor: int) -> tuple[int, Optional[Token]]:
    end = cursor
    while end < len(source) and source[end] in DIGITS:
        end += 1
    if end == cursor:
        return cursor, None
    return end, Token(source[cursor:end], TokenKind.INTEGER)


def lex_identifier(source: str, cursor: int) -> tuple[int, Optional[Token]]:
    if source[cursor] not in IDENTIFIER_START:
        return cursor, None
    end = cursor + 1
    while end < len(source) and source[end] in IDENTIFIER_REST:
        end += 1
    return end, Token(source[cursor:end], TokenKind.IDENTIFIER)


SCANNERS: tuple[Scanner, ...] = (lex_syntax, lex_integer, lex_identifier)


def lex(source: str) -> list[Token]:
    tokens: list[Token] = []
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos] in WHITESPACE:
            pos += 1
            continue

        for scanner in SCANNERS:
            end, token = scanner(source, pos)
            if end > pos:
                tokens.append(token)
                pos = end
                break
        else:
            raise LexError(pos, source[pos:])

    logger.debug("lexed %d tokens", len(tokens))
    return tokens
