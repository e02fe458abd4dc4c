from __future__ import annotations

import argparse
import logging
import sys

from lithp import config
from lithp.interpreter import Interpreter
from lithp.repl import run_repl

logger = logging.getLogger("lithp")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="lithp", description="Evaluate lithp expressions, one line at a time.")
    parser.add_argument("path", nargs="?", default=None, help="file to evaluate (default: read stdin)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    try:
        limit = config.get_recursion_limit()
    except ValueError as ex:
        parser.error(str(ex))
    if limit is not None:
        logger.debug("Setting recursion limit to %d", limit)
        sys.setrecursionlimit(limit)

    interp = Interpreter()
    if args.path is None:
        failures = run_repl(sys.stdin, sys.stdout, sys.stderr, interp, prompt=config.get_prompt())
    else:
        with open(args.path, encoding="utf-8") as f:
            failures = run_repl(f, sys.stdout, sys.stderr, interp)
    return 1 if failures and args.path is not None else 0


if __name__ == "__main__":
    sys.exit(main())
