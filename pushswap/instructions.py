"""The eleven push_swap instructions and a runner that checks a sequence."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pushswap.stack import Stack, push_to


class UnknownInstruction(ValueError):
    """Raised for a name that is not one of the push_swap instructions."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown instruction: {name!r}")
        self.name = name


class Instruction(Enum):
    """An instruction, named as it is written in the instruction list."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def parse_instruction(name: str) -> Instruction:
    """Return the instruction with exactly this name."""
    try:
        return Instruction(name)
    except ValueError:
        raise UnknownInstruction(name) from None


def _swap_both(a: Stack, b: Stack) -> None:
    # Both stacks must hold something; otherwise neither is touched.
    if len(a) and len(b):
        a.swap()
        b.swap()


def _rotate_both(a: Stack, b: Stack) -> None:
    a.rotate()
    b.rotate()


def _reverse_rotate_both(a: Stack, b: Stack) -> None:
    a.reverse_rotate()
    b.reverse_rotate()


_ACTIONS = {
    Instruction.SA: lambda a, b: a.swap(),
    Instruction.SB: lambda a, b: b.swap(),
    Instruction.SS: _swap_both,
    Instruction.PA: lambda a, b: push_to(b, a),
    Instruction.PB: lambda a, b: push_to(a, b),
    Instruction.RA: lambda a, b: a.rotate(),
    Instruction.RB: lambda a, b: b.rotate(),
    Instruction.RR: _rotate_both,
    Instruction.RRA: lambda a, b: a.reverse_rotate(),
    Instruction.RRB: lambda a, b: b.reverse_rotate(),
    Instruction.RRR: _reverse_rotate_both,
}


def apply(instruction: Instruction | str, a: Stack, b: Stack) -> None:
    """Carry out one instruction on stacks ``a`` and ``b``.

    An instruction that has nothing to act on, such as ``pa`` with an
    empty ``b``, leaves the stacks as they are.
    """
    if not isinstance(instruction, Instruction):
        instruction = parse_instruction(instruction)
    _ACTIONS[instruction](a, b)


def run(numbers: Iterable[int], instructions: Iterable[Instruction | str]) -> bool:
    """Apply the instructions to a stack A holding ``numbers``.

    Return True when A ends sorted in ascending order and B empty.
    Raises :class:`UnknownInstruction` on the first name that is not an
    instruction.
    """
    a = Stack(numbers)
    b = Stack()
    for instruction in instructions:
        apply(instruction, a, b)
    return a.is_sorted() and not len(b)