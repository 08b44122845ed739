"""Command line entry point: `python -m kelp` or the `kelp` script."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from kelp.config import get_log_level
from kelp.errors import KelpError
from kelp.interpreter import Interpreter
from kelp.io import UserIO


def repl(interp: Interpreter, user_io: UserIO) -> None:
    """Prompt, read a line, evaluate it and print the result until EOF."""
    while True:
        user_io.greet()
        line = user_io.read_line()
        if line is None:
            user_io.write_line("")
            return
        if not line.strip():
            continue
        try:
            user_io.write_line(interp.rep(line))
        except KelpError as e:
            user_io.write_line(f"syntax error: {e}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="kelp", description="Kelp Lisp interpreter")
    parser.add_argument("file", nargs="?", help="evaluate a source file and exit")
    parser.add_argument("-e", "--eval", dest="code", help="evaluate CODE, print the result and exit")
    parser.add_argument("--no-prelude", action="store_true", help="start without the core prelude")
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
        interp = Interpreter(prelude=None if args.no_prelude else 'auto')
        if args.code is not None:
            print(interp.rep(args.code))
        elif args.file is not None:
            with open(args.file, encoding="utf-8") as f:
                print(interp.rep(f.read()))
        else:
            repl(interp, UserIO())
    except KelpError as e:
        print(f"kelp: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
