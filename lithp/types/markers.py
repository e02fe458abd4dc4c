"""Distinguished atoms used as booleans and as the unit placeholder.

There is no boolean type: `#t` and `#f` are ordinary symbols, and only `#f`
counts as false.
"""

from __future__ import annotations

from lithp import Expression
from lithp.types.symbol import Symbol

TRUE = Symbol("#t")
FALSE = Symbol("#f")

# Returned by forms evaluated only for their effect, e.g. define
UNIT = Symbol("")


def truthy(value: Expression) -> bool:
    return value != FALSE


def from_bool(flag: bool) -> Symbol:
    return TRUE if flag else FALSE


def is_number(value: Expression) -> bool:
    # bool is an int subclass but never a lithp number
    return isinstance(value, (int, float)) and not isinstance(value, bool)
