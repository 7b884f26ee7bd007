"""CLI: python -m hasp [-v] <program.hasp>"""

import logging
import sys
from pathlib import Path

from .parser import parse_source

USAGE = "Usage: python -m hasp [-v] <program.hasp>"


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    verbose = "-v" in args
    if verbose:
        args.remove("-v")
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    try:
        src = Path(args[0]).read_text()
    except OSError as e:
        print(f"Cannot read {args[0]}: {e.strerror}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    try:
        exprs = parse_source(src)
    except SyntaxError as e:
        print(f"SyntaxError: {e.msg}", file=sys.stderr)
        sys.exit(1)

    for expr in exprs:
        print(expr)


if __name__ == "__main__":
    main()
