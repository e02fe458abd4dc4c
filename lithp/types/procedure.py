"""User-defined procedure (closure) representation and argument binding."""

from __future__ import annotations

from io import StringIO

from lithp import Expression
from lithp.types.environment import Environment
from lithp.types.symbol import Symbol


class Procedure:
    """A closure: formal parameters, a body, and the env it was created in."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: Expression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: Expression = body
        # Held by reference, never copied: later defines in this frame stay visible
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<procedure (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[Expression]) -> Environment:
        """
        Return a fresh call frame whose outer link is the captured env, with
        the formals bound positionally to `args`.

        Surplus arguments are dropped. Formals without an argument stay
        unbound, so referring to one inside the body fails as undefined.
        """
        call_env = Environment(outer=self.env)
        for name, value in zip(self.formals, args):
            call_env.define(name, value)
        return call_env
