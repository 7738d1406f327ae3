"""Circular stacks and the elementary push_swap moves on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class Stack:
    """A stack of integers whose first element is the top.

    The stack is circular: rotating moves the top to the bottom and
    reverse rotating brings the bottom back to the top.
    """

    __slots__ = ("_items",)

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Stack):
            return self._items == other._items
        return NotImplemented

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[0]

    def swap(self) -> bool:
        """Exchange the two top values; return False if the stack is empty."""
        if not self._items:
            return False
        if len(self._items) > 1:
            first = self._items.popleft()
            second = self._items.popleft()
            self._items.appendleft(first)
            self._items.appendleft(second)
        return True

    def rotate(self) -> bool:
        """Move the top value to the bottom; return False if the stack is empty."""
        if not self._items:
            return False
        self._items.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom value to the top; return False if the stack is empty."""
        if not self._items:
            return False
        self._items.rotate(1)
        return True

    def push(self, value: int) -> None:
        """Put a value on top of the stack."""
        self._items.appendleft(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def index(self, value: int) -> int:
        """Return the distance of a value from the top, the top being 0."""
        try:
            return self._items.index(value)
        except ValueError:
            raise ValueError(f"{value} is not in the stack") from None

    def is_sorted(self) -> bool:
        """Tell whether the values rise strictly from top to bottom.

        An empty stack does not count as sorted.
        """
        if not self._items:
            return False
        items = self._items
        return all(a < b for a, b in zip(items, list(items)[1:]))


def push_to(src: Stack, dst: Stack) -> bool:
    """Move the top of ``src`` onto ``dst``; return False if ``src`` is empty."""
    if not len(src):
        return False
    dst.push(src.pop())
    return True