"""
Line-oriented driver for lithp.

Each input line is read completely, then its expressions are evaluated in
order. Results go to `out` as `Result: <value>`; failures go to `err` as
`Parse Error: ...` or `Eval Error: ...`, and the driver moves on to the next
line. Definitions made before a failure are kept.
"""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

from lithp.errors import LithpError, LithpSyntaxError
from lithp.interpreter import Interpreter
from lithp.printer import to_lisp_string
from lithp.reader.parser import parse_all

logger = logging.getLogger(__name__)


def run_line(interp: Interpreter, line: str, out: TextIO, err: TextIO) -> bool:
    """Read and evaluate one line; return False if it failed."""
    try:
        exprs = parse_all(line)
    except LithpSyntaxError as ex:
        logger.warning("Parse error on %r: %s", line, ex)
        print(f"Parse Error: {ex}", file=err)
        return False
    except RecursionError:
        logger.warning("Reading %r exhausted the stack", line)
        print("Parse Error: maximum recursion depth exceeded", file=err)
        return False

    for expr in exprs:
        try:
            text = to_lisp_string(interp.eval_expr(expr))
        except LithpError as ex:
            logger.warning("Evaluation of %r failed: %s", line, ex)
            print(f"Eval Error: {ex}", file=err)
            return False
        except RecursionError:
            # Raised by runaway evaluation or by rendering a very deep result
            logger.warning("Evaluation of %r exhausted the stack", line)
            print("Eval Error: maximum recursion depth exceeded", file=err)
            return False
        print(f"Result: {text}", file=out)
    return True


def run_repl(
    lines: Iterable[str],
    out: TextIO,
    err: TextIO,
    interp: Interpreter | None = None,
    prompt: str = "",
) -> int:
    """Drive `interp` over `lines`; return the number of lines that failed."""
    if interp is None:
        interp = Interpreter()
    failures = 0
    if prompt:
        out.write(prompt)
        out.flush()
    for line in lines:
        if line.strip() and not run_line(interp, line, out, err):
            failures += 1
        if prompt:
            out.write(prompt)
            out.flush()
    logger.debug("Input exhausted, %d failed line(s)", failures)
    return failures
