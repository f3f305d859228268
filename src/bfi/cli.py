from __future__ import annotations

import argparse
import logging
import sys

from typing import List, Optional

from .api import RunOptions, compile_file, run_program
from .errors import BFError
from .state import TAPE_SIZE

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bfi",
        description="Brainfuck interpreter.",
    )
    parser.add_argument("-f", "--file", required=True, help="Source file to run")
    parser.add_argument("--tape-size", type=int, default=TAPE_SIZE, help=f"Number of tape cells (default {TAPE_SIZE})")
    parser.add_argument("--check", action="store_true", help="Only check the program's brackets, do not run it")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log progress to stderr (-vv for debug)")
    args = parser.parse_args(argv)

    if args.tape_size < 1:
        parser.error("--tape-size must be at least 1")

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)

    try:
        program = compile_file(args.file)
    except OSError as e:
        print(f"Couldn't read {args.file}: {e}", file=sys.stderr)
        return 1
    except BFError as e:
        print(e, file=sys.stderr)
        return 1

    logger.info("%s: %d instructions, %d loops", args.file, len(program), program.loop_count)
    if args.check:
        return 0

    try:
        result = run_program(
            program,
            stdin=sys.stdin.buffer,
            stdout=sys.stdout.buffer,
            options=RunOptions(tape_size=args.tape_size),
        )
    except BFError as e:
        print(f"\n{e}", file=sys.stderr)
        return 1

    logger.info("finished after %d steps", result.steps)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
