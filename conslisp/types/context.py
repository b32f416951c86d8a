"""Variable bindings for conslisp.

A Context maps identifier text to evaluated values. Lambda calls run in a
derived Context: a child frame linked to the caller's frame. `define` only
writes the frame it is called on, and a caller's frame is never written while
one of its children is still evaluating, so a child always sees exactly the
bindings its caller had at call time. That is the same behaviour as copying
the whole mapping on every call, without the copy.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping, Optional

from conslisp import LispValue
from conslisp.types.nil import Nil


class Context:
    """Chain of frames mapping names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Context] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Context | None = outer

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame."""
        self.vars[name] = value

    def find(self, name: str) -> Optional[Context]:
        """Find the nearest frame in the chain that binds `name`."""
        ctx: Optional[Context] = self
        while ctx is not None:
            if name in ctx.vars:
                return ctx
            ctx = ctx.outer
        return None

    def lookup(self, name: str) -> LispValue:
        """Return the value bound to `name`, or Nil when it has no binding.

        0 and false are ordinary values here. Nil is what a lambda binds for a
        missing argument, so such a binding also reads as absent.
        """
        ctx = self.find(name)
        if ctx is None:
            return Nil
        return ctx.vars[name]

    def derive(self, bindings: Mapping[str, LispValue] | None = None) -> Context:
        """Snapshot of this context extended with `bindings`."""
        child = Context(outer=self)
        if bindings:
            child.vars.update(bindings)
        return child

    def names(self) -> Iterator[str]:
        seen: set[str] = set()
        ctx: Optional[Context] = self
        while ctx is not None:
            for name in ctx.vars:
                if name not in seen:
                    seen.add(name)
                    yield name
            ctx = ctx.outer

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Context ")
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {self.lookup(k)!r}" for k in self.names()))
            buffer.write("}>")
            return buffer.getvalue()
