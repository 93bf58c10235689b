"""Command-line entry point: calculator, text patterns and the menu programs."""

from __future__ import annotations

import argparse
import sys

from drillbox import events, patterns, shopping
from drillbox.arithmetic import Operation, calculate

_PATTERNS = {
    "half-pyramid-numbers": patterns.half_pyramid_numbers,
    "half-pyramid-symbol": patterns.half_pyramid_symbol,
    "hollow-pyramid": patterns.hollow_pyramid,
    "inverted-half-pyramid-numbers": patterns.inverted_half_pyramid_numbers,
    "inverted-half-pyramid-symbol": patterns.inverted_half_pyramid_symbol,
    "pascal-diamond": patterns.pascal_diamond,
    "pascal-pyramid": patterns.pascal_pyramid,
    "pyramid-numbers": patterns.pyramid_numbers,
    "pyramid-symbol": patterns.pyramid_symbol,
}

_MENUS = {"events": events.main, "shop": shopping.main}

_TITLES = {
    Operation.ADD: "Addition (integer)",
    Operation.SUBTRACT: "Subtraction (integer)",
    Operation.MULTIPLY: "Multiplication (integer)",
    Operation.DIVIDE: "Division (integer, without truncation)",
}

_CALCULATOR_MENU = (
    "-- SIMPLE CALCULATOR --\n"
    "1. Addition\n"
    "2. Subtraction\n"
    "3. Multiplication\n"
    "4. Division\n"
    "0. Exit\n"
)


def _ask_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _report(operation: Operation, num1: int, num2: int) -> int:
    try:
        result = calculate(operation, num1, num2)
    except ZeroDivisionError as exc:
        print(f"\tError: {exc}")
        return 1
    value = f"{result:.2f}" if operation is Operation.DIVIDE else str(result)
    print(f"\t{_TITLES[operation]}:")
    print(f"\t{num1} {operation.symbol} {num2} = {value}")
    return 0


def _run_calculator(values: list[int]) -> int:
    if values:
        option, num1, num2 = values
        if option == 0:
            print("Exiting...")
            return 0
        if option not in set(Operation):
            print("Error: Incorrect option.")
            return 1
        return _report(Operation(option), num1, num2)

    print(_CALCULATOR_MENU)
    option = _ask_int("Enter the option (1-4) or (0) to stop: ")
    if option == 0:
        print("\nExiting...")
        return 0
    if option is None or option not in set(Operation):
        print("\nError: Incorrect option.")
        return 1
    num1 = _ask_int("\n\tEnter number 1: ")
    num2 = _ask_int("\tEnter number 2: ")
    if num1 is None or num2 is None:
        print("\nError: Invalid number.")
        return 1
    print()
    return _report(Operation(option), num1, num2)


def _run_pattern(kind: str, height: int | None) -> int:
    if height is None:
        height = _ask_int("Enter the height: ")
        if height is None:
            print("\nError: Invalid height.")
            return 1
        print()
    for line in _PATTERNS[kind](height):
        print(line)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drillbox", description="Calculator, number patterns and menu programs."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    calc = commands.add_parser(
        "calc", help="four-function integer calculator (interactive without values)"
    )
    calc.add_argument(
        "values",
        nargs="*",
        type=int,
        metavar="N",
        help="option (1-4, 0 to stop) followed by two integers",
    )

    pattern = commands.add_parser("pattern", help="print a text pattern")
    pattern.add_argument("kind", choices=sorted(_PATTERNS))
    pattern.add_argument("height", nargs="?", type=int, help="pattern height")

    commands.add_parser("events", help="event scheduling menu", add_help=False)
    commands.add_parser("shop", help="online shopping menu", add_help=False)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Dispatch to the calculator, a pattern or one of the menu programs."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    if args_list and args_list[0] in _MENUS:
        return _MENUS[args_list[0]](args_list[1:])

    parser = _build_parser()
    args = parser.parse_args(args_list)
    try:
        if args.command == "calc":
            if args.values and len(args.values) != 3:
                parser.error("calc takes an option and two integers, or nothing")
            return _run_calculator(args.values)
        return _run_pattern(args.kind, args.height)
    except EOFError:
        print()
        return 1


if __name__ == "__main__":
    sys.exit(main())