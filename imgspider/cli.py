"""Command-line entry point of the spider."""

from __future__ import annotations

import sys
from typing import Sequence

from .config import MAX_ARGS, ArgumentError, parse_args
from .crawler import Spider
from .http import HttpError
from .tools import usage


def main(argv: Sequence[str] | None = None) -> int:
    """Run the spider with ``argv`` (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 1 <= len(args) <= MAX_ARGS:
        usage()
        return 2
    try:
        config = parse_args(args)
    except ArgumentError as exc:
        print(exc, file=sys.stderr)
        usage()
        return 2
    print(config.describe(), end="")
    try:
        Spider(config).run()
    except (HttpError, LookupError, ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())