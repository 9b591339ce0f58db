from __future__ import annotations

import argparse
import logging
import sys

from minilisp.config import get_log_level
from minilisp.errors import LispError
from minilisp.interpreter import Interpreter
from minilisp.repl import repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minilisp", description="A minimal Lisp interpreter")
    parser.add_argument("files", nargs="*", help="source files to run before anything else")
    parser.add_argument(
        "-i", "--interactive", action="store_true",
        help="start the REPL after running the given files",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter()
    for path in args.files:
        try:
            interp.load(path)
        except (LispError, OSError, RecursionError, UnicodeDecodeError) as e:
            print(f"{path}: {e}", file=sys.stderr)
            return 1

    if not args.files or args.interactive:
        repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
