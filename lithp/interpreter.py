from __future__ import annotations

import logging

from lithp import Expression
from lithp.builtin.env_builtin import new_global_environment
from lithp.evaluation.evaluator import evaluate
from lithp.reader.parser import lex, TokenStream
from lithp.types.environment import Environment
from lithp.types.markers import UNIT

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates lithp source against one long-lived global environment,
    so definitions persist across calls.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = new_global_environment()
        logger.debug("Global environment ready with %d bindings", len(self.env.vars))
        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate `code` for its definitions, discarding the values."""
        stream = TokenStream(lex(code))
        while (expr := stream.parse_expr()) is not None:
            evaluate(expr, self.env)

    def eval_expr(self, expr: Expression) -> Expression:
        logger.debug("Evaluating %r", expr)
        return evaluate(expr, self.env)

    def eval(self, code: str) -> Expression:
        """Evaluate every expression in `code` and return the last value.

        Errors propagate; effects of expressions evaluated before the failing
        one are kept.
        """
        stream = TokenStream(lex(code))
        result: Expression = UNIT
        while (expr := stream.parse_expr()) is not None:
            result = self.eval_expr(expr)
        return result
