import pytest

from stackswap.parsing import (
    InputError,
    parse_arguments,
    parse_int,
    split_words,
    validate_arguments,
)


def test_split_words_drops_empty_pieces():
    assert split_words("  1  2 ") == ["1", "2"]
    assert split_words("") == []


def test_split_words_only_on_spaces():
    assert split_words("a\tb c") == ["a\tb", "c"]


@pytest.mark.parametrize(
    "token, expected",
    [("42", 42), ("+42", 42), ("-42", -42), ("-0", 0), ("2147483647", 2147483647)],
)
def test_parse_int(token, expected):
    assert parse_int(token) == expected


def test_parse_int_bare_sign_is_zero():
    assert parse_int("-") == 0
    assert parse_int("+") == 0


@pytest.mark.parametrize("token", ["2147483648", "-2147483648", "000000000001", "99999999999"])
def test_parse_int_out_of_range(token):
    with pytest.raises(InputError):
        parse_int(token)


def test_parse_arguments_single_string():
    assert parse_arguments(["3 2 1"]) == [3, 2, 1]


def test_parse_arguments_many_strings():
    assert parse_arguments(["1", "-5 +7", "  9  "]) == [1, -5, 7, 9]


def test_parse_arguments_keeps_order():
    values = [5, -3, 12, 0, 8]
    assert parse_arguments([str(v) for v in values]) == values


@pytest.mark.parametrize("args", [["1 1"], ["4", "2", "4"], ["0", "-0"]])
def test_parse_arguments_duplicates(args):
    with pytest.raises(InputError):
        parse_arguments(args)


@pytest.mark.parametrize("args", [[""], ["   "], ["", " "]])
def test_parse_arguments_nothing_given(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_parse_arguments_rejects_invalid_before_parsing():
    with pytest.raises(InputError):
        parse_arguments(["1 2", "abc"])


def test_trailing_sign_after_space_reads_as_zero():
    assert parse_arguments(["1 -"]) == [1, 0]


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["2147483648"])