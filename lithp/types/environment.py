"""Runtime environment for lithp.

An Environment is one frame of Symbol -> value bindings plus an optional link
to the enclosing frame. Frames are shared by reference: every closure created
in a frame, and every call frame created from such a closure, points at the
same object, so a later `define` in that frame is visible to all of them.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping, Optional

from lithp import Expression
from lithp.errors import LithpShapeError, LithpUndefinedSymbol
from lithp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to lithp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Expression] = {}
        # Never reassigned after construction, so the chain cannot form a cycle
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: Expression) -> Expression | None:
        """Bind `name` to `value` in this frame only.

        Outer frames are never searched or modified: a define inside a call
        shadows an outer binding rather than assigning to it.

        Returns the value previously bound to `name` in this frame, or None.
        Raises LithpShapeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LithpShapeError("define", f"cannot bind {name!r}: not a symbol")
        previous = self.vars.get(name)
        self.vars[name] = value
        return previous

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol, default: Expression | None = None) -> Expression | None:
        """Like lookup, but return `default` when `name` is unbound."""
        env = self.find(name)
        if env is None:
            return default
        return env.vars[name]

    def lookup(self, name: Symbol) -> Expression:
        """Look up the value bound to `name`, searching outward.

        Raises LithpUndefinedSymbol if no frame up to the global one binds it.
        """
        env = self.find(name)
        if env is None:
            raise LithpUndefinedSymbol(name)
        return env.vars[name]

    def update(self, mapping: Mapping[Symbol, Expression]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def chain(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            frames = []
            for env in self.chain():
                # The global frame holds every builtin; keep it short
                if env.outer is None and env is not self:
                    frames.append(f"<global {len(env.vars)} bindings>")
                    continue
                frame_buf = StringIO()
                env._write_vars(frame_buf)
                frames.append(frame_buf.getvalue())
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
