# stackswap

Sort a list of integers using two stacks, `a` and `b`, and a small fixed set of
instructions. The package also checks whether a given sequence of instructions
really sorts a list.

## Instructions

| Name  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the top two elements of `a`                  |
| `sb`  | swap the top two elements of `b`                  |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` upwards (the top goes to the bottom)   |
| `rb`  | rotate `b` upwards                                |
| `rr`  | `ra` and `rb` together                            |
| `rra` | rotate `a` downwards (the bottom goes to the top) |
| `rrb` | rotate `b` downwards                              |
| `rrr` | `rra` and `rrb` together                          |

An instruction that has nothing to act on, such as `sa` on a stack with fewer
than two elements, leaves the stacks unchanged.

## Command line

Install the package, then print a sequence of instructions that sorts the
numbers, one per line:

```
push-swap 3 2 5 1 4
push-swap "3 2 5" 1 4
```

The first number given is the top of stack `a`. Numbers may be given as
separate arguments or as several numbers in one argument, separated by spaces.
A sign is allowed at the start of a number. Each number must lie between
-2147483647 and 2147483647 and appear only once. Invalid input prints `Error`
on standard error and exits with status 1 (status 5 when no number could be
read at all). A list that is already sorted produces no output. Run with no
arguments, `push-swap` prints nothing and exits with status 1.

The strategy depends on the size: two elements take at most one `sa`, three at
most two instructions, four or five move the smallest values to `b` first, and
larger lists push everything but one element to `b` and insert back, each time,
the element that is cheapest to put in place.

To check a sequence, pass the numbers as arguments and feed the instructions
on standard input, one per line:

```
push-swap 3 2 5 1 4 | stackswap-checker 3 2 5 1 4
```

The checker writes `OK` on standard error when `a` ends sorted in ascending
order with `b` empty, and `KO` otherwise. Every line must be exactly an
instruction name followed by a newline; an unknown instruction, an empty line
or a last line without a newline makes it write `Error` and exit with status 1.
Run with no arguments, it does nothing and exits with status 0.

## Library

```python
from stackswap.sorting import solve
from stackswap.checker import check

ops = solve([3, 2, 5, 1, 4])
assert check([3, 2, 5, 1, 4], ops)
```

- `stackswap.stacks.Stacks` holds the two stacks as deques, top first, and
  applies `stackswap.stacks.Operation` values (or their names) through `apply`
  and `run`. Operations that acted are recorded in `history`; `rr` and `rrr`
  are always recorded. `is_solved` tells whether `a` is ascending and `b` empty.
- `stackswap.sorting` offers `solve`, which returns the list of operations, as
  well as `sort_three`, `sort_five` and `sort_large`, which act on a `Stacks`.
- `stackswap.parsing.parse_arguments` turns command-line arguments into a list
  of integers and raises `stackswap.parsing.InputError` on bad input, an empty
  list or duplicates; `validate_arguments`, `split_words` and `parse_int` are
  the steps it is built from.
- `stackswap.checker` offers `parse_instruction`, `read_instructions` (a
  generator over the lines of a stream) and `check`.

## Tests

```
pip install -e ".[test]"
pytest
```