from lithp import EvaluatorFn
from lithp import Expression
from lithp.errors import LithpShapeError
from lithp.types.environment import Environment
from lithp.types.procedure import Procedure
from lithp.types.symbol import Symbol


def lambda_form(
    form: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (lambda (params...) body)
    Captures `env` itself, so defines made later in that frame are seen by the body.
    """
    if len(form) != 3:
        raise LithpShapeError("lambda", "expected (lambda (<params>) expr)")

    _, params, body = form
    if not isinstance(params, list):
        raise LithpShapeError("lambda", "params must be a list.")
    if not all(isinstance(p, Symbol) for p in params):
        raise LithpShapeError("lambda", "params must be a list of symbols")

    return Procedure(list(params), body, env)
