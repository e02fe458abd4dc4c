from __future__ import annotations

from typing import Any


def _show(value: Any) -> str:
    # Deferred: the printer depends on the value types, which import this module
    from lithp.printer import to_lisp_string
    return to_lisp_string(value)


class LithpError(Exception):
    """ Base class for all lithp errors"""
    pass


class LithpSyntaxError(LithpError):
    """ Raised by the reader on malformed source text"""


class LithpUndefinedSymbol(LithpError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, name: Any):
        super().__init__(f"undefined: {name}")
        self.name = name


class LithpEmptyApplication(LithpError):
    """ Raised when the empty list is evaluated as a form"""

    def __init__(self):
        super().__init__("Expected nonempty list")


class LithpInvalidHead(LithpError):
    """ Raised when the head of a form is not a bare symbol"""

    def __init__(self, head: Any):
        super().__init__(f"Expected symbol as head of list, got {_show(head)}")
        self.head = head


class LithpNotCallable(LithpError):
    """ Raised when the head of a form resolves to something that cannot be applied"""

    def __init__(self, value: Any):
        super().__init__(f"'{_show(value)}' is not callable")
        self.value = value


class LithpShapeError(LithpError):
    """ Raised when a builtin form receives the wrong number or kind of operands"""

    def __init__(self, form_name: str, detail: str):
        super().__init__(f"({form_name}): {detail}")
        self.form_name = form_name
        self.detail = detail


class LithpTypeError(LithpError):
    """ Raised when an arithmetic builtin receives a non-number"""

    def __init__(self, operation: str, detail: str):
        super().__init__(f"({operation}): {detail}")
        self.operation = operation
        self.detail = detail
