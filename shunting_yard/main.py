"""
Command-line entrypoint.

The words after the options are joined with spaces, evaluated, and the result
printed on stdout. Errors are printed on stderr, with a caret under the
offending character.

Options must come before the expression; everything from the first word that
is not an option on is part of the expression, so ``shunting-yard -3!`` works.
"""
import argparse
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from shunting_yard.common.config import CalculatorConfig
from shunting_yard.common.diagnostics import format_diagnostic
from shunting_yard.common.errors import CalculationError
from shunting_yard.common.formatting import trim_double
from shunting_yard.common.logger import logger, set_verbose
from shunting_yard.common.parser import ExpressionParser

VALUE_OPTIONS = ("--width", "--exponent-digits")
FLAG_OPTIONS = ("-v", "--verbose", "-h", "--help")


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expression : List[str]
        Words of the expression, joined with single spaces before evaluation.
    config : CalculatorConfig
        Display settings.
    verbose : bool
        Log at DEBUG level.
    """

    expression: List[str] = Field(default_factory=list)
    config: CalculatorConfig = Field(default_factory=CalculatorConfig)
    verbose: bool = False


def join_args(words: List[str]) -> str:
    """Concatenate the expression words, separated by single spaces."""
    return " ".join(words)


def expression_start(argv: List[str]) -> Optional[int]:
    """
    Return the index of the first expression word in ``argv``.

    :param List[str] argv: Arguments without the program name
    :return: Index of the first word that is not an option or an option value,
        or None if ``argv`` already separates the expression with "--"
    :rtype: Optional[int]
    """
    i = 0
    while i < len(argv):
        word = argv[i]
        if word == "--":
            return None
        name, has_value, _ = word.partition("=")
        if name in VALUE_OPTIONS:
            i += 1 if has_value else 2
        elif word in FLAG_OPTIONS:
            i += 1
        else:
            return i
    return min(i, len(argv))


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments without the program name, sys.argv[1:] if None
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    defaults = CalculatorConfig.model_fields
    parser = argparse.ArgumentParser(
        prog="shunting-yard",
        description="Evaluate an arithmetic expression: + - * / ^ ! and parentheses",
    )
    parser.add_argument("expression", nargs="*", help="Expression to evaluate, e.g. 2 + 3 * 4")
    parser.add_argument(
        "--width",
        type=int,
        default=defaults["term_width"].default,
        help="Width of error messages (default: %(default)s)",
    )
    parser.add_argument(
        "--exponent-digits",
        type=int,
        default=defaults["min_e_digits"].default,
        help="Fractional digits printed; scientific notation from 10^N (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debugging information")

    argv = list(sys.argv[1:] if argv is None else argv)
    # Words such as "-3!" would otherwise be taken for unknown options
    start = expression_start(argv)
    if start is not None:
        argv.insert(start, "--")

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            expression=args.expression,
            config=CalculatorConfig(term_width=args.width, min_e_digits=args.exponent_digits),
            verbose=args.verbose,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def run_expression(expression: str, config: CalculatorConfig) -> int:
    """
    Evaluate one expression and print the result or the diagnostic.

    :return: Process exit code
    :rtype: int
    """
    try:
        result = ExpressionParser.evaluate(expression)
    except CalculationError as exc:
        logger.debug(f"❌ {exc.kind.value} error in {expression!r}")
        print(format_diagnostic(exc, config), file=sys.stderr)
        return 1

    print(trim_double(result, config))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function of the ``shunting-yard`` command.
    """
    cli_args = parse_args(argv)
    set_verbose(cli_args.verbose)
    return run_expression(join_args(cli_args.expression), cli_args.config)


if __name__ == "__main__":
    sys.exit(main())
