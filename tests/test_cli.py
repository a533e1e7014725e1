import re

import pytest

from philosophers.cli import main

LINE = re.compile(r"^\d+ \d+ (has taken a fork|is eating|is sleeping|is thinking|died)$")


@pytest.mark.parametrize("argv", [[], ["1", "2"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert "Error: Invalid number of arguments" in captured.err
    assert captured.out == ""


def test_non_numeric_argument(capsys):
    assert main(["3", "abc", "10", "10"]) == 1
    assert "Error: Arguments must be positive numbers" in capsys.readouterr().err


def test_empty_argument(capsys):
    assert main(["3", "", "10", "10"]) == 1
    assert "Error: Empty argument" in capsys.readouterr().err


def test_out_of_range_argument(capsys):
    assert main(["3", "2147483648", "10", "10"]) == 1
    assert "Error: Argument out of valid integer range" in capsys.readouterr().err


def test_successful_run_with_meal_limit(capsys):
    assert main(["3", "400", "10", "10", "1"]) == 0
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines
    assert all(LINE.match(line) for line in lines)
    assert any(line.endswith("is eating") for line in lines)
    assert captured.err == ""


def test_single_philosopher_run_reports_death(capsys):
    assert main(["1", "30", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].endswith(" 1 died")