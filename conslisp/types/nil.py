from __future__ import annotations


class NilType:
    """The list terminator. Marks an absent `second` slot of a Pair."""

    __slots__ = ()

    def __repr__(self): return "NIL"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
