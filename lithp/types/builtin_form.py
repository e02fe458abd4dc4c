from __future__ import annotations

from typing import Callable

from lithp import Expression


class BuiltinForm:
    """A primitive operation bound by name in the global environment.

    The handler receives the whole unevaluated form (head included), the
    active environment and the evaluator, and decides for itself which
    operands to evaluate.
    """

    __slots__ = ("name", "handler")

    def __init__(self, name: str, handler: Callable[..., Expression]):
        self.name = name
        self.handler = handler

    def __call__(self, form: list[Expression], env, evaluate_fn) -> Expression:
        return self.handler(form, env, evaluate_fn)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BuiltinForm) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("builtin", self.name))

    def __repr__(self):
        return f"<builtin {self.name}>"
