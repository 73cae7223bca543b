"""Test the shunting-yard command line."""
import pytest

from shunting_yard.common.config import CalculatorConfig
from shunting_yard.main import expression_start, join_args, main, parse_args


def test_join_args() -> None:
    """Expression words are joined with single spaces."""
    assert join_args(["2", "+", "3"]) == "2 + 3"
    assert join_args([]) == ""


def test_parse_args_defaults() -> None:
    """Without options, default display settings apply."""
    args = parse_args(["1", "+", "1"])
    assert args.expression == ["1", "+", "1"]
    assert args.config == CalculatorConfig()
    assert not args.verbose


def test_parse_args_rejects_bad_config() -> None:
    """Out-of-range settings stop the program with a usage error."""
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--width", "5", "1"])
    assert excinfo.value.code == 2


@pytest.mark.parametrize("argv,expected", [
    (["-3!"], 0),
    (["2", "+", "3"], 0),
    (["--width", "100", "-3!"], 2),
    (["--exponent-digits=2", "-v", "-1/3"], 2),
    (["--", "-3!"], None),
    (["--verbose"], 1),
    ([], 0),
])
def test_expression_start(argv, expected) -> None:
    """The expression begins at the first word that is not an option."""
    assert expression_start(argv) == expected


@pytest.mark.parametrize("argv,expected", [
    (["2", "+", "3", "*", "4"], "14"),
    (["(1 + 2) ^ 2 / 4"], "2.25"),
    (["--", "-3!"], "-6"),
    (["-3!"], "-6"),
    (["-(1+2)", "*", "2"], "-6"),
    (["--width", "100", "-3!"], "-6"),
    (["--exponent-digits=2", "-1/3"], "-0.33"),
    (["1/0"], "inf"),
    (["--exponent-digits", "2", "1/3"], "0.33"),
    (["10^15"], "1e+15"),
])
def test_main_prints_result(argv, expected, capsys) -> None:
    """The trimmed result goes to stdout and the exit code is 0."""
    assert main(argv) == 0
    captured = capsys.readouterr()
    assert captured.out == f"{expected}\n"
    assert captured.err == ""


def test_main_reports_error(capsys) -> None:
    """Errors go to stderr with a caret, and the exit code is 1."""
    assert main(["2+3)"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    message, caret = captured.err.splitlines()
    assert message == "Error: mismatched right parenthesis: 2+3)"
    assert message[caret.index("^")] == ")"


def test_main_without_input(capsys) -> None:
    """No expression at all is a failure with a friendly prompt."""
    assert main([]) == 1
    assert capsys.readouterr().err == "This is a calculator - provide some math!\n"


