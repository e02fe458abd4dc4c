from lithp import EvaluatorFn
from lithp import Expression
from lithp.errors import LithpShapeError
from lithp.types.environment import Environment
from lithp.types.markers import UNIT
from lithp.types.symbol import Symbol


def define_form(
    form: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (define symbol value)
    Binds in the active frame only; an outer binding of the same name is shadowed, not changed.
    """
    if len(form) != 3:
        raise LithpShapeError("define", "expected (define symbol value)")

    _, name, val_expr = form
    if not isinstance(name, Symbol):
        raise LithpShapeError("define", f"symbol must be a symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return UNIT
