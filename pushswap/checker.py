"""Reading operations from standard input and checking they sort the stack."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import ParseError, parse_arguments, split_arguments
from .stacks import Operation, Stacks


class CheckerError(ValueError):
    """Raised when an input line is not a known instruction."""


def _parse_line(line: str) -> Operation | None:
    """Return the operation a line names, or None for an empty line.

    A line must be an instruction name followed by a newline; a final line
    without its newline is rejected.
    """
    if line == "\n":
        return None
    if not line.endswith("\n"):
        raise CheckerError(f"invalid instruction: {line!r}")
    try:
        return Operation(line[:-1])
    except ValueError:
        raise CheckerError(f"invalid instruction: {line!r}") from None


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply the instructions in ``lines`` to ``values``; report success.

    Each line holds one instruction and ends with a newline. An empty line
    ends the input early; the lines after it are not read. Returns True
    when stack ``b`` ends empty and stack ``a`` ascends.
    """
    stacks = Stacks(values)
    for line in lines:
        operation = _parse_line(line)
        if operation is None:
            break
        stacks.apply(operation)
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Check the instructions on standard input against the given integers."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        tokens = split_arguments(args)
        if len(tokens) <= 1:
            return 0
        values = parse_arguments(tokens)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    try:
        solved = check(values, sys.stdin)
    except CheckerError:
        # A bad instruction is reported, but the exit status stays zero.
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())