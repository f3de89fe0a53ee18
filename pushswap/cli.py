"""Command line entry: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .algorithm import assign_ranks, sort_stacks
from .parsing import InputError, parse_arguments
from .stacks import Stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the numbers, write the sorting operations to stdout, return 0.

    Invalid input writes ``Error`` to stderr and produces no operations.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    stacks = Stacks(values)
    assign_ranks(stacks)
    sort_stacks(stacks)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())