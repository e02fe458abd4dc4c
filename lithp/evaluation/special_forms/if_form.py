from lithp import EvaluatorFn
from lithp import Expression
from lithp.errors import LithpShapeError
from lithp.types.environment import Environment
from lithp.types.markers import truthy


def if_form(
    form: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    if len(form) != 4:
        raise LithpShapeError("if", "expected (if test conseq alt)")

    _, test, conseq, alt = form
    # Only #f is false; the branch not taken is never evaluated
    if truthy(evaluate_fn(test, env)):
        return evaluate_fn(conseq, env)
    return evaluate_fn(alt, env)
