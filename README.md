# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and only
eleven operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse-rotate `a`, `b`, or both: the bottom element goes to the top |

An operation that has nothing to act on leaves the stacks unchanged. For
example, `pa` with an empty `b` does nothing, and `ss` does nothing unless
both stacks hold values.

The package provides two commands.

## push_swap

```
push_swap 3 2 5 1 4
push_swap "3 2 5 1 4"
```

You can give the numbers as separate arguments, as space-separated words
inside one argument, or as a mix of both. The command prints one operation
per line. When those operations are applied, `a` ends up sorted in ascending
order with the smallest number on top, and `b` ends up empty. Input that is
already sorted, or that holds a single number, produces no output.

Invalid input prints `Error` to standard error. Input is invalid when:

- an argument holds no number at all,
- a word is not an integer,
- a number is outside the 32-bit signed range, or
- a number appears more than once.

Two or three numbers are sorted directly in stack `a`. Larger inputs use a
different strategy. The command moves values to `b`, each time taking the
value that needs the fewest rotations to place, until three remain in `a`.
It then sorts those three and brings the values back the same way.

## checker

```
push_swap 3 2 5 1 4 | checker 3 2 5 1 4
```

`checker` reads operations from standard input, one per line, and applies
them to the given numbers. It prints `OK` if `a` ends up sorted and `b` ends
up empty, and `KO` otherwise. Reading stops at the first line that does not
end in a newline. If the very first line lacks a newline, the answer is `KO`.
An unknown operation, or invalid numbers, prints `Error` to standard error.
With no arguments, `checker` prints nothing.

Both commands always exit with status 0.

## Library use

```python
from pushswap.sorter import push_swap
from pushswap.instructions import run

numbers = [3, 2, 5, 1, 4]
ops = push_swap(numbers)   # a list of operation names such as "pb", "ra"
assert run(numbers, ops)   # True: a sorted, b empty
```

The main modules:

- **`pushswap.stack.Stack`** is the circular stack. Its methods are `swap`, `rotate`, `reverse_rotate`, `push`, `pop`, `top`, `index` and `is_sorted`. `pushswap.stack.push_to` moves the top of one stack onto another.
- **`pushswap.parsing.parse_numbers`** validates command-line words and raises `pushswap.parsing.InputError` on bad input.
- **`pushswap.instructions`** provides:
  - the `Instruction` enum,
  - `parse_instruction`, which raises `UnknownInstruction` for unknown names,
  - `apply`, which carries out one operation on two stacks,
  - `run`, which applies a whole sequence.
- **`pushswap.cost`** computes the rotation counts (`Moves`, `Mode`, `cost_to_a`, `cost_to_b`, `cheapest_to_a`, `cheapest_to_b`) that the sorter uses.
- **`pushswap.checker`** provides `read_instructions` and `check`, which work on lines of text.

## Tests

```
pip install -e ".[test]"
pytest
```