"""Counting the rotations needed to move one value between stacks.

A value leaves the top of the source stack and must land where it keeps
the destination stack circularly ordered. Stack B is kept descending and
stack A ascending. Both stacks may be rotated up or down, together or
apart, and the cheapest way is chosen.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from pushswap.stack import Stack


class Mode(IntEnum):
    """How the two stacks are turned before the push."""

    SRC_UP_DST_DOWN = 1
    SRC_DOWN_DST_UP = 2
    BOTH_UP = 3
    BOTH_DOWN = 4


@dataclass(frozen=True)
class Moves:
    """Rotation counts that bring ``target`` to the top of the source stack
    and the destination stack into place to receive it."""

    target: int
    src_up: int
    src_down: int
    dst_up: int
    dst_down: int

    @property
    def mode(self) -> Mode:
        """The cheapest way of combining the rotations."""
        return optimize(self)[0]

    @property
    def rotations(self) -> int:
        """The number of rotation instructions the cheapest way takes."""
        return optimize(self)[1]

    @property
    def cost(self) -> int:
        """All instructions needed, the final push included."""
        return self.rotations + 1


def optimize(moves: Moves) -> tuple[Mode, int]:
    """Choose the cheapest mode and return it with its rotation count.

    On a tie the mode listed first in :class:`Mode` wins.
    """
    candidates = (
        (Mode.SRC_UP_DST_DOWN, moves.src_up + moves.dst_down),
        (Mode.SRC_DOWN_DST_UP, moves.src_down + moves.dst_up),
        (Mode.BOTH_UP, max(moves.src_up, moves.dst_up)),
        (Mode.BOTH_DOWN, max(moves.src_down, moves.dst_down)),
    )
    return min(candidates, key=lambda candidate: candidate[1])


def _source_rotations(src: Stack, value: int) -> tuple[int, int]:
    index = src.index(value)
    return index, len(src) - index


def _rotations_to(size: int, index: int) -> tuple[int, int]:
    return index, (size - index) % size


def _slot_in_descending(items: list[int], value: int) -> int:
    for index, item in enumerate(items):
        if items[index - 1] > value > item:
            return index
    return 0


def _slot_in_ascending(items: list[int], value: int) -> int:
    for index, item in enumerate(items):
        if items[index - 1] < value < item:
            return index
    return 0


def _slot_below_in_three(items: list[int], value: int) -> int:
    size = len(items)
    for index, item in enumerate(items):
        if item < value < items[(index + 1) % size]:
            return index
    return 0


def cost_to_b(src: Stack, dst: Stack, value: int) -> Moves:
    """Rotations to push ``value`` from ``src`` into the descending ``dst``."""
    src_up, src_down = _source_rotations(src, value)
    items = list(dst)
    size = len(items)
    if not items:
        dst_up, dst_down = 0, 0
    elif value < min(items):
        dst_up, dst_down = _rotations_to(size, items.index(max(items)))
    elif value > max(items):
        dst_up, dst_down = _rotations_to(size, (items.index(min(items)) + 1) % size)
    else:
        index = _slot_in_descending(items, value)
        dst_up, dst_down = index, size - index
    return Moves(value, src_up, src_down, dst_up, dst_down)


def cost_to_a(src: Stack, dst: Stack, value: int) -> Moves:
    """Rotations to push ``value`` from ``src`` into the ascending ``dst``."""
    src_up, src_down = _source_rotations(src, value)
    items = list(dst)
    size = len(items)
    if not items:
        dst_up, dst_down = 0, 0
    elif value < min(items):
        dst_up, dst_down = _rotations_to(size, items.index(min(items)))
    elif value > max(items):
        dst_up, dst_down = _rotations_to(size, (items.index(max(items)) + 1) % size)
    elif size == 3:
        position = _slot_below_in_three(items, value) + 1
        dst_up = position
        dst_down = 2 if position == 1 else size - position
    else:
        index = _slot_in_ascending(items, value)
        dst_up, dst_down = index, size - index
    return Moves(value, src_up, src_down, dst_up, dst_down)


def _cheapest(src: Stack, dst: Stack, cost_of) -> Moves:
    if not len(src):
        raise ValueError("no value to move from an empty stack")
    best: Moves | None = None
    for value in src:
        moves = cost_of(src, dst, value)
        if best is None or moves.cost < best.cost:
            best = moves
    return best


def cheapest_to_b(src: Stack, dst: Stack) -> Moves:
    """The moves of the value in ``src`` cheapest to push into B.

    Among equally cheap values the one nearest the top wins.
    """
    return _cheapest(src, dst, cost_to_b)


def cheapest_to_a(src: Stack, dst: Stack) -> Moves:
    """The moves of the value in ``src`` cheapest to push into A.

    Among equally cheap values the one nearest the top wins.
    """
    return _cheapest(src, dst, cost_to_a)