"""Built-in bindings for the lithp global environment.

This module defines the numeric primitives and the registration helpers that
build a global environment. Numeric primitives are builtin forms like the
special forms: they receive the raw form and evaluate every operand
themselves, left to right.
"""
from __future__ import annotations

import math
from functools import reduce

from lithp import Expression, EvaluatorFn
from lithp.errors import LithpTypeError
from lithp.evaluation.special_forms import SPECIAL_FORMS
from lithp.printer import to_lisp_string
from lithp.types.builtin_form import BuiltinForm
from lithp.types.environment import Environment
from lithp.types.markers import TRUE, FALSE, from_bool, is_number
from lithp.types.symbol import Symbol


def numeric_operands(
    op: str, form: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> list[float]:
    """Evaluate every operand of `form`, requiring each to be a number."""
    values = []
    for operand in form[1:]:
        value = evaluate_fn(operand, env)
        if not is_number(value):
            raise LithpTypeError(op, f"all expressions must be numbers, got {to_lisp_string(value)}")
        values.append(float(value))
    return values


# -------------------------------
# Arithmetic
# -------------------------------
def mul(form: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> float:
    """Product of all operands; 1 when there are none."""
    return reduce(lambda acc, n: acc * n, numeric_operands("*", form, env, evaluate_fn), 1.0)


def sub(form: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> float:
    """Subtract later operands from the first; 0 when there are none.

    A single operand is returned unchanged (no unary negation).
    """
    values = numeric_operands("-", form, env, evaluate_fn)
    if not values:
        return 0.0
    return reduce(lambda acc, n: acc - n, values)


# -------------------------------
# Comparison
# -------------------------------
def equals(form: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Symbol:
    """Return #t if every operand equals the first (or zero/one operand), else #f."""
    values = numeric_operands("=", form, env, evaluate_fn)
    if not values:
        return from_bool(True)
    first = values[0]
    return from_bool(all(n == first for n in values[1:]))


PRIMITIVES = {
    Symbol("*"): BuiltinForm("*", mul),
    Symbol("-"): BuiltinForm("-", sub),
    Symbol("="): BuiltinForm("=", equals),
}

CONSTANTS = {
    Symbol("pi"): math.pi,
    # The markers are bound to themselves so #t and #f can be written directly
    TRUE: TRUE,
    FALSE: FALSE,
}


def register(env: Environment) -> Environment:
    """Install the special forms, numeric primitives and constants into `env`."""
    env.update(CONSTANTS)
    env.update(SPECIAL_FORMS)
    env.update(PRIMITIVES)
    return env


def new_global_environment() -> Environment:
    """Build a fresh global environment (no outer frame) with every builtin bound."""
    return register(Environment())
