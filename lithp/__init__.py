# Core type aliases for lithp's data model.
# Code and runtime values share one representation (no separate compile phase):
# - Symbol atoms are lithp.types.symbol.Symbol
# - Number atoms are float
# - lists are Python lists
# - builtin forms and procedures are BuiltinForm / Procedure objects
#
# Naming guidance:
# - Expression: use anywhere a value of that union is expected, whether it is
#   about to be evaluated or has just been produced by evaluation.

from typing import Any, Callable

Expression = Any

# Evaluator function type passed into builtin form handlers
EvaluatorFn = Callable[..., Expression]
