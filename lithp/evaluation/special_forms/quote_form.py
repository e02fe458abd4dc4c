from lithp import EvaluatorFn
from lithp import Expression
from lithp.errors import LithpShapeError
from lithp.types.environment import Environment


def quote_form(
    form: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Expression:
    if len(form) != 2:
        raise LithpShapeError("quote", "expected (quote expr)")
    return form[1]
