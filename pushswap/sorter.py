"""Sorting stack A with the fewest push_swap instructions found greedily.

Small inputs are sorted in place. Larger ones are moved to stack B,
always taking the value that is cheapest to place, until three values
remain in A. Those are sorted and the values in B are brought back the
same way. A last rotation puts the smallest value on top.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.cost import Mode, Moves, cheapest_to_a, cheapest_to_b
from pushswap.parsing import InputError, parse_numbers
from pushswap.stack import Stack, push_to

_THREE_CASES = {
    "middle_low_high": ("sa",),
    "high_low_middle": ("rra",),
    "descending": ("sa", "rra"),
    "high_low_high_mid": ("rra", "rra"),
    "low_high_middle": ("rra", "sa"),
}

_MOVES_ON_A = {
    "sa": Stack.swap,
    "ra": Stack.rotate,
    "rra": Stack.reverse_rotate,
}


def _apply_on_a(stack: Stack, ops: Iterable[str]) -> list[str]:
    done = []
    for op in ops:
        _MOVES_ON_A[op](stack)
        done.append(op)
    return done


def sort_two(stack: Stack) -> list[str]:
    """Sort a stack of two values; return the instructions used."""
    if len(stack) != 2:
        raise ValueError("sort_two needs exactly two values")
    first, second = stack
    if first > second:
        return _apply_on_a(stack, ("ra",))
    return []


def sort_three(stack: Stack) -> list[str]:
    """Sort a stack of three values; return the instructions used."""
    if len(stack) != 3:
        raise ValueError("sort_three needs exactly three values")
    top, second, bottom = stack
    if second < top < bottom:
        case = "middle_low_high"
    elif bottom < top < second:
        case = "high_low_middle"
    elif top > second > bottom:
        case = "descending"
    elif top > second and second < bottom:
        case = "high_low_high_mid"
    elif top < second and second > bottom:
        case = "low_high_middle"
    else:
        return []
    return _apply_on_a(stack, _THREE_CASES[case])


def _turn(stack: Stack, name: str, count: int, up: bool) -> list[str]:
    step = stack.rotate if up else stack.reverse_rotate
    for _ in range(count):
        step()
    return [name] * count


def _turn_both(src: Stack, dst: Stack, count: int, up: bool) -> list[str]:
    for _ in range(count):
        if up:
            src.rotate()
            dst.rotate()
        else:
            src.reverse_rotate()
            dst.reverse_rotate()
    return ["rr" if up else "rrr"] * count


def execute(moves: Moves, src: Stack, dst: Stack, toward_b: bool) -> list[str]:
    """Carry out ``moves``: turn both stacks and push the target across.

    ``toward_b`` tells whether ``src`` is stack A and ``dst`` stack B, or
    the other way round; it only decides the instruction names.
    """
    src_name, dst_name = ("a", "b") if toward_b else ("b", "a")
    ops: list[str] = []
    mode = moves.mode
    if mode is Mode.SRC_UP_DST_DOWN:
        ops += _turn(src, "r" + src_name, moves.src_up, up=True)
        ops += _turn(dst, "rr" + dst_name, moves.dst_down, up=False)
    elif mode is Mode.SRC_DOWN_DST_UP:
        ops += _turn(src, "rr" + src_name, moves.src_down, up=False)
        ops += _turn(dst, "r" + dst_name, moves.dst_up, up=True)
    elif mode is Mode.BOTH_UP:
        both = min(moves.src_up, moves.dst_up)
        ops += _turn_both(src, dst, both, up=True)
        ops += _turn(src, "r" + src_name, moves.src_up - both, up=True)
        ops += _turn(dst, "r" + dst_name, moves.dst_up - both, up=True)
    else:
        both = min(moves.src_down, moves.dst_down)
        ops += _turn_both(src, dst, both, up=False)
        ops += _turn(src, "rr" + src_name, moves.src_down - both, up=False)
        ops += _turn(dst, "rr" + dst_name, moves.dst_down - both, up=False)
    push_to(src, dst)
    ops.append("p" + dst_name)
    return ops


def min_to_top(stack: Stack) -> list[str]:
    """Rotate stack A the short way until its smallest value is on top."""
    if not len(stack):
        return []
    size = len(stack)
    position = stack.index(min(stack))
    if position == 0:
        return []
    if position <= size // 2:
        return _turn(stack, "ra", position, up=True)
    return _turn(stack, "rra", size - position, up=False)


def push_swap(numbers: Sequence[int]) -> list[str]:
    """Return the instructions that sort ``numbers`` into ascending order."""
    a = Stack(numbers)
    if len(a) <= 1 or a.is_sorted():
        return []
    if len(a) == 2:
        return sort_two(a)
    if len(a) == 3:
        return sort_three(a)

    b = Stack()
    push_to(a, b)
    push_to(a, b)
    ops = ["pb", "pb"]
    while len(a) > 3:
        ops += execute(cheapest_to_b(a, b), a, b, toward_b=True)
        if a.is_sorted():
            break
    if len(a) == 3:
        ops += sort_three(a)
        ops += min_to_top(a)
    while len(b):
        ops += execute(cheapest_to_a(b, a), b, a, toward_b=False)
    ops += min_to_top(a)
    return ops


def main(argv: Sequence[str] | None = None) -> int:
    """Print the instructions that sort the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = parse_numbers(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("".join(f"{op}\n" for op in push_swap(numbers)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())