"""Command-line entry point: evaluate the program given as the only argument."""

from __future__ import annotations

import argparse
import logging
import sys

from conslisp import config
from conslisp.errors import ConsLispError
from conslisp.interpreter import Interpreter
from conslisp.printer import to_string

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conslisp",
        description="Evaluate a conslisp program and print the value of its last form.",
    )
    parser.add_argument("program", help="program text, e.g. '(+ 1 2 3)'")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.get_log_level())

    default_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(default_limit, config.get_recursion_limit()))
    try:
        result = Interpreter().run(args.program)
    except ConsLispError as e:
        logger.debug("evaluation aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        sys.setrecursionlimit(default_limit)

    print(to_string(result))
    return 0
