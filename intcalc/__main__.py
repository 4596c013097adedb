"""CLI: python -m intcalc <expression>  (reads stdin when no expression is given)"""

import logging
import os
import sys

from .calculator import calculate
from .errors import CalcError


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=os.environ.get("INTCALC_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args and args[0] in ("-h", "--help"):
        print("Usage: python -m intcalc <expression>")
        return

    if args:
        src = " ".join(args)
    else:
        src = sys.stdin.read().rstrip("\r\n")

    if not src.strip():
        print("Usage: python -m intcalc <expression>", file=sys.stderr)
        sys.exit(2)

    try:
        result = calculate(src)
    except CalcError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    print(result)


if __name__ == "__main__":
    main()
