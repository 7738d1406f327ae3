import random

import pytest

from pushswap.cost import cheapest_to_a, cheapest_to_b
from pushswap.sorter import (
    execute,
    main,
    min_to_top,
    push_swap,
    sort_three,
    sort_two,
)
from pushswap.stack import Stack, push_to

VALID_OPS = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def _replay(numbers, ops):
    a = Stack(numbers)
    b = Stack()
    for op in ops:
        if op in ("sa", "ss"):
            a.swap()
        if op in ("sb", "ss"):
            b.swap()
        if op in ("ra", "rr"):
            a.rotate()
        if op in ("rb", "rr"):
            b.rotate()
        if op in ("rra", "rrr"):
            a.reverse_rotate()
        if op in ("rrb", "rrr"):
            b.reverse_rotate()
        if op == "pa":
            push_to(b, a)
        if op == "pb":
            push_to(a, b)
    return list(a), list(b)


def test_sorted_input_needs_nothing():
    assert push_swap([1, 2, 3, 4, 5]) == []


def test_empty_and_single_need_nothing():
    assert push_swap([]) == []
    assert push_swap([42]) == []


def test_two_values_rotated():
    assert push_swap([2, 1]) == ["ra"]


def test_sort_two_rejects_wrong_size():
    with pytest.raises(ValueError):
        sort_two(Stack([1, 2, 3]))


def test_sort_three_rejects_wrong_size():
    with pytest.raises(ValueError):
        sort_three(Stack([1, 2]))


def test_sort_three_swap_case():
    stack = Stack([2, 1, 3])
    assert sort_three(stack) == ["sa"]
    assert list(stack) == [1, 2, 3]


def test_sort_three_descending_case():
    stack = Stack([3, 2, 1])
    assert sort_three(stack) == ["sa", "rra"]
    assert list(stack) == [1, 2, 3]


@pytest.mark.parametrize(
    "values",
    [[1, 2, 3], [1, 3, 2], [2, 1, 3], [2, 3, 1], [3, 1, 2], [3, 2, 1]],
)
def test_sort_three_sorts_every_order(values):
    stack = Stack(values)
    ops = sort_three(stack)
    assert list(stack) == [1, 2, 3]
    assert len(ops) <= 2
    assert _replay(values, ops) == ([1, 2, 3], [])


def test_min_to_top_takes_short_way():
    stack = Stack([3, 4, 1, 2])
    ops = min_to_top(stack)
    assert list(stack) == [1, 2, 3, 4]
    assert len(ops) <= 2
    assert _replay([3, 4, 1, 2], ops)[0] == [1, 2, 3, 4]


def test_min_to_top_on_top_already():
    stack = Stack([1, 5, 3])
    assert min_to_top(stack) == []
    assert list(stack) == [1, 5, 3]


def test_execute_toward_b_pushes_target():
    src = Stack([5, 1, 7])
    dst = Stack([9, 3])
    moves = cheapest_to_b(src, dst)
    ops = execute(moves, src, dst, toward_b=True)
    assert ops[-1] == "pb"
    assert dst.top() == moves.target
    assert len(ops) == moves.cost
    assert moves.target not in list(src)
    assert len(src) + len(dst) == 5


def test_execute_toward_a_names_ops_for_b_source():
    src = Stack([4, 2])
    dst = Stack([1, 3, 5])
    moves = cheapest_to_a(src, dst)
    ops = execute(moves, src, dst, toward_b=False)
    assert ops[-1] == "pa"
    assert dst.top() == moves.target
    assert all(op in VALID_OPS for op in ops)
    assert "sa" not in ops and "pb" not in ops


@pytest.mark.parametrize("size", [4, 5, 6, 7, 10, 25, 50, 100])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_push_swap_sorts_random_input(size, seed):
    values = list(range(-size, size * 3, 4))[:size]
    random.Random(seed * 1000 + size).shuffle(values)
    ops = push_swap(values)
    assert all(op in VALID_OPS for op in ops)
    a, b = _replay(values, ops)
    assert b == []
    assert a == sorted(values)


def test_push_swap_starts_by_pushing_two():
    ops = push_swap([4, 3, 2, 1])
    assert ops[:2] == ["pb", "pb"]
    assert _replay([4, 3, 2, 1], ops) == ([1, 2, 3, 4], [])


def test_push_swap_handles_extreme_ints():
    values = [2147483647, -2147483648, 0, 5, -7]
    ops = push_swap(values)
    assert _replay(values, ops) == (sorted(values), [])


def test_main_prints_instructions(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "ra\n"


def test_main_with_words_in_one_argument(capsys):
    main(["3 1 2 5 4"])
    out = capsys.readouterr().out
    ops = out.splitlines()
    assert out.endswith("\n")
    assert _replay([3, 1, 2, 5, 4], ops) == ([1, 2, 3, 4, 5], [])


def test_main_reports_duplicates(capsys):
    main(["1", "1"])
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_reports_bad_number(capsys):
    main(["1", "abc"])
    assert capsys.readouterr().err == "Error\n"


def test_main_without_arguments_prints_nothing(capsys):
    main([])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""