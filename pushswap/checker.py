"""Checking that a list of instructions read from input sorts the numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.instructions import UnknownInstruction, run
from pushswap.parsing import InputError, parse_numbers


def read_instructions(stream: Iterable[str]) -> list[str]:
    """Return the instruction names held in the lines of ``stream``.

    Each instruction stands on a line of its own ending in a newline.
    Reading stops at the first line that has no newline; that line is
    not taken.
    """
    names: list[str] = []
    for line in stream:
        if not line.endswith("\n"):
            break
        names.append(line[:-1])
    return names


def check(numbers: Sequence[int], lines: Iterable[str]) -> bool:
    """Tell whether the instructions in ``lines`` sort ``numbers``.

    ``lines`` are raw input lines, newlines included. When the very first
    line has no newline there is no instruction list and the answer is
    False. Raises :class:`UnknownInstruction` on a line that is not an
    instruction.
    """
    lines = list(lines)
    if lines and not lines[0].endswith("\n"):
        return False
    return run(numbers, read_instructions(lines))


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    try:
        sorted_ok = check(numbers, sys.stdin)
    except UnknownInstruction:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())