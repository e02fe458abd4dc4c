"""Text rendering of lithp values for the driver and for error messages."""

from __future__ import annotations

import math

from lithp import Expression
from lithp.types.builtin_form import BuiltinForm
from lithp.types.procedure import Procedure
from lithp.types.symbol import Symbol


def format_number(n: float) -> str:
    # 6.0 prints as 6, other floats keep their shortest round-trip form
    if math.isfinite(n) and float(n).is_integer():
        return str(int(n))
    return repr(float(n))


def to_lisp_string(value: Expression) -> str:
    match value:
        case Symbol():
            return value.name
        case int() | float():
            return format_number(value)
        case list():
            return "(" + " ".join(to_lisp_string(v) for v in value) + ")"
        case BuiltinForm() | Procedure():
            return repr(value)
    return str(value)
