import pytest

from philosophers.validation import ArgumentError, validate_arg, validate_args


@pytest.mark.parametrize("text", ["1", "42", "800", "007"])
def test_valid_numbers_round_trip(text):
    assert validate_arg(text) == int(text)


def test_upper_bound_accepted():
    assert validate_arg("2147483647") == 2147483647


def test_empty_argument():
    with pytest.raises(ArgumentError, match="Empty argument"):
        validate_arg("")


@pytest.mark.parametrize("text", ["-5", "+5", "12a", " 3", "3.5", "abc", "\u0663"])
def test_non_digits_rejected(text):
    with pytest.raises(ArgumentError, match="must be positive numbers"):
        validate_arg(text)


@pytest.mark.parametrize("text", ["0", "000", "2147483648", "99999999999999999999"])
def test_out_of_range(text):
    with pytest.raises(ArgumentError, match="out of valid integer range"):
        validate_arg(text)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        validate_arg("x")


def test_validate_args_returns_values_in_order():
    args = ["5", "800", "200", "200", "7"]
    assert validate_args(args) == [int(a) for a in args]


def test_validate_args_empty_list():
    assert validate_args([]) == []


def test_validate_args_stops_at_first_error():
    with pytest.raises(ArgumentError) as info:
        validate_args(["5", "", "0"])
    assert str(info.value) == "Error: Empty argument"