"""Cons-cell s-expressions.

A Sexp is either an Atom wrapping one Token, or a Pair of (first, second).
`second` is another Sexp or the terminator Nil, so a chain of Pairs ending in
Nil is a proper list:

    (+ 1 2)  ->  Pair(+, Pair(1, Pair(2, Nil)))

Nodes are immutable and compare structurally.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Iterator, Union

from conslisp.errors import MalformedFormError, ParseError
from conslisp.types.nil import Nil, NilType
from conslisp.types.token import Token, TokenKind


@dataclass(frozen=True)
class Atom:
    token: Token

    @property
    def value(self) -> str:
        return self.token.value


@dataclass(frozen=True)
class Pair:
    first: Sexp
    second: Union[Sexp, NilType] = Nil

    def __post_init__(self):
        if isinstance(self.first, NilType):
            raise ValueError("Pair.first cannot be NIL")


Sexp = Union[Atom, Pair]
MaybeSexp = Union[Atom, Pair, NilType]

# Head of the implicit sequencing form wrapped around programs and lambda bodies
BEGIN = Atom(Token("begin", TokenKind.IDENTIFIER))


def pretty(sexp: MaybeSexp) -> str:
    """Fully dotted rendering, e.g. (+ . (1 . NIL))."""
    heads: list[str] = []
    current = sexp
    while isinstance(current, Pair):
        heads.append(pretty(current.first))
        current = current.second
    tail = "NIL" if isinstance(current, NilType) else current.value
    return "".join(f"({head} . " for head in heads) + tail + ")" * len(heads)


def append(first: MaybeSexp, second: MaybeSexp) -> Pair:
    """Return a new list with `second` as the tail of the chain `first`.

    Nil `first` starts a one-element list; an Atom `first` becomes the head of
    a new Pair; a Pair `first` is rebuilt down to its terminal tail. Each call
    is O(len(first)) and walks the chain without recursing.
    """
    if isinstance(first, NilType):
        if isinstance(second, NilType):
            raise ParseError("Expected second.")
        return Pair(second, Nil)

    if isinstance(first, Atom):
        return Pair(first, second)

    heads: list[Sexp] = []
    current: MaybeSexp = first
    while isinstance(current, Pair):
        heads.append(current.first)
        current = current.second
    result = append(current, second)
    for head in reversed(heads):
        result = Pair(head, result)
    return result


def iter_list(sexp: MaybeSexp) -> Iterator[Sexp]:
    """Yield the elements of a proper list; Nil is the empty list."""
    current = sexp
    while not isinstance(current, NilType):
        if not isinstance(current, Pair):
            raise MalformedFormError(f"Not a linked list: {pretty(sexp)}")
        yield current.first
        current = current.second


def to_source(sexp: MaybeSexp) -> str:
    """Render in bare-list syntax, e.g. (+ 1 2), which reads back to the same tree."""
    if isinstance(sexp, NilType):
        return "NIL"
    if isinstance(sexp, Atom):
        return sexp.value
    with StringIO() as buffer:
        buffer.write("(")
        buffer.write(to_source(sexp.first))
        current = sexp.second
        while isinstance(current, Pair):
            buffer.write(" ")
            buffer.write(to_source(current.first))
            current = current.second
        if isinstance(current, Atom):
            buffer.write(" . ")
            buffer.write(current.value)
        buffer.write(")")
        return buffer.getvalue()
