import io

import pytest

from stackswap.checker import check, parse_instruction, read_instructions
from stackswap.parsing import InputError
from stackswap.sorting import solve
from stackswap.stacks import Operation

ALL_NAMES = ["sa", "sb", "ra", "rb", "rr", "rra", "rrb", "rrr", "pa", "pb"]


@pytest.mark.parametrize("name", ALL_NAMES)
def test_parse_instruction_round_trip(name):
    op = parse_instruction(name + "\n")
    assert op is Operation(name)
    assert str(op) + "\n" == name + "\n"


@pytest.mark.parametrize(
    "line",
    ["\n", "s\n", "sa", "rra", "rrx\n", "sc\n", "rrab\n", "", " sa\n", "SA\n", "sa \n"],
)
def test_parse_instruction_rejects_bad_lines(line):
    with pytest.raises(InputError):
        parse_instruction(line)


def test_read_instructions_reads_all_lines():
    stream = io.StringIO("pb\nra\nrrr\npa\n")
    assert list(read_instructions(stream)) == [
        Operation.PB,
        Operation.RA,
        Operation.RRR,
        Operation.PA,
    ]


def test_read_instructions_empty_stream():
    assert list(read_instructions(io.StringIO(""))) == []


def test_read_instructions_is_lazy_until_bad_line():
    gen = read_instructions(io.StringIO("sa\nxx\n"))
    assert next(gen) is Operation.SA
    with pytest.raises(InputError):
        next(gen)


def test_read_instructions_missing_final_newline():
    with pytest.raises(InputError):
        list(read_instructions(io.StringIO("sa\nra")))


def test_check_swap_sorts_pair():
    assert check([2, 1], [Operation.SA]) is True


def test_check_without_instructions():
    assert check([2, 1], []) is False
    assert check([1, 2, 3], []) is True


def test_check_requires_empty_b():
    assert check([1, 2], [Operation.PB]) is False


def test_check_accepts_names():
    assert check([3, 1, 2], ["ra"]) is True
    assert check([3, 1, 2], ["rra"]) is False


@pytest.mark.parametrize(
    "values",
    [
        [2, 1],
        [3, 2, 1],
        [5, 1, 4, 2, 3],
        [4, 3, 2, 1],
        [9, -3, 7, 0, 12, 5, -8, 1],
        list(range(20, 0, -1)),
    ],
)
def test_check_accepts_solver_output(values):
    assert check(values, solve(values)) is True


def test_check_rejects_truncated_solver_output():
    values = [9, -3, 7, 0, 12, 5, -8, 1]
    ops = solve(values)
    assert check(values, ops[:-1]) is False