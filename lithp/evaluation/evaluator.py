"""Core evaluator for lithp.

Plain recursive evaluation on the Python stack. There is no trampoline, so a
deeply recursive lithp program ends in RecursionError; the driver reports it
like any other failed line.
"""

from __future__ import annotations

from lithp import Expression
from lithp.errors import LithpEmptyApplication, LithpInvalidHead
from lithp.evaluation.apply import apply
from lithp.types.builtin_form import BuiltinForm
from lithp.types.environment import Environment
from lithp.types.procedure import Procedure
from lithp.types.symbol import Symbol


def evaluate(expr: Expression, env: Environment) -> Expression:
    """Evaluate `expr` in `env` and return the resulting value."""
    match expr:
        case []:
            raise LithpEmptyApplication()

        case [Symbol() as head, *_]:
            # Operator position is always a name; computed heads are not supported
            return apply(env.lookup(head), expr, env, evaluate)

        case [head, *_]:
            raise LithpInvalidHead(head)

        case Symbol():
            return env.lookup(expr)

        case int() | float() | BuiltinForm() | Procedure():
            # Numbers, and callables that were already evaluated, stand for themselves
            return expr

    raise TypeError(f"Cannot evaluate object of type {type(expr).__name__}: {expr!r}")
