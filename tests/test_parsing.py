import pytest

from pushswap.parsing import ParseError, parse_arguments, parse_int, split_arguments


def test_split_joins_arguments_on_spaces():
    assert split_arguments(["1 2", "3"]) == ["1", "2", "3"]


def test_split_ignores_repeated_and_outer_spaces():
    assert split_arguments(["  4   5 ", "", "6"]) == ["4", "5", "6"]


def test_split_accepts_sign_runs():
    assert split_arguments(["--5", "+-3"]) == ["--5", "+-3"]


def test_split_of_nothing_is_empty():
    assert split_arguments([]) == []


@pytest.mark.parametrize("arg", ["1a", "-", "+", "1\t2", "a", "1-2"])
def test_split_rejects_bad_tokens(arg):
    with pytest.raises(ParseError):
        split_arguments([arg])


def test_parse_int_plain_and_signed():
    assert parse_int("42") == 42
    assert parse_int("+7") == 7
    assert parse_int("-1") == -1


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


@pytest.mark.parametrize("token", ["2147483648", "-2147483649", "99999999999999999999"])
def test_parse_int_out_of_range(token):
    with pytest.raises(ParseError):
        parse_int(token)


@pytest.mark.parametrize("token", ["--5", "+-5", "", "abc"])
def test_parse_int_without_digits(token):
    with pytest.raises(ParseError):
        parse_int(token)


def test_parse_int_long_minus_one_is_rejected():
    with pytest.raises(ParseError):
        parse_int("-000000001")


def test_parse_int_leading_zeros():
    assert parse_int("0000000005") == 5


def test_parse_int_is_a_parse_error_value_error():
    with pytest.raises(ValueError):
        parse_int("x")


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3 2", "1"]) == [3, 2, 1]


def test_parse_arguments_rejects_duplicates():
    with pytest.raises(ParseError):
        parse_arguments(["1 2 1"])


def test_parse_arguments_rejects_duplicates_written_differently():
    with pytest.raises(ParseError):
        parse_arguments(["1", "+1"])


def test_parse_arguments_rejects_bad_token():
    with pytest.raises(ParseError):
        parse_arguments(["1 2 three"])


def test_parse_arguments_round_trip():
    values = [5, -3, 0, 2147483647, -2147483648]
    assert parse_arguments([" ".join(str(v) for v in values)]) == values