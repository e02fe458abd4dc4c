"""Application engine for lithp.

Two kinds of value can sit in operator position:
- BuiltinForm: gets the raw form and evaluates what it needs itself.
- Procedure: operands are evaluated left to right in the caller's env, then
  the body runs in a new frame chained to the procedure's captured env.
"""

from lithp import Expression, EvaluatorFn
from lithp.errors import LithpNotCallable
from lithp.types.builtin_form import BuiltinForm
from lithp.types.environment import Environment
from lithp.types.procedure import Procedure


def apply_procedure(
    fn: Procedure,
    form: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Apply a Procedure to the operands of `form`.

    Parameters:
    - fn: The Procedure being applied.
    - form: The whole application, head included; operands are form[1:].
    - env: The caller's environment, used only to evaluate operands.
    - evaluate_fn: Evaluator used for operands and for the body.
    """
    args = [evaluate_fn(arg, env) for arg in form[1:]]
    # Lexical scoping: chain to the defining env, not the caller's
    return evaluate_fn(fn.body, fn.extend_env(args))


def apply(
    head: Expression,
    form: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Apply the resolved head of `form`, or raise LithpNotCallable."""
    if isinstance(head, BuiltinForm):
        return head(form, env, evaluate_fn)
    elif isinstance(head, Procedure):
        return apply_procedure(head, form, env, evaluate_fn)
    else:
        raise LithpNotCallable(head)
