"""Command line entry: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .parsing import ParseError, check_duplicates, index_values, is_sorted, parse_arguments
from .sorting import sort_stack
from .stacks import PushSwap


def solve(args: Iterable[str]) -> list[str]:
    """Moves that sort the numbers in ``args``; raises ParseError if invalid."""
    values = parse_arguments(args)
    check_duplicates(values)
    if is_sorted(values):
        return []
    stacks = PushSwap(values, index_values(values))
    sort_stack(stacks)
    return stacks.moves


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; prints one move per line, or "Error" on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        moves = solve(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    sys.exit(main())