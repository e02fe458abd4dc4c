from lithp import EvaluatorFn
from lithp import Expression
from lithp.types.environment import Environment


def begin_form(
    form: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (begin expr...)
    Evaluates each expr in order and returns the last value, or 0 when empty.
    """
    result: Expression = 0.0
    for e in form[1:]:
        result = evaluate_fn(e, env)
    return result
