"""Command line entry for problems that read their data from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from olimpiada.arithmetic import operate
from olimpiada.sequences import attempts_before_password, digit_counts


def _password(tokens: list[str]) -> str:
    return str(attempts_before_password(int(token) for token in tokens))


def _digits(tokens: list[str]) -> str:
    if not tokens:
        raise ValueError("the count of numbers is missing")
    count = int(tokens[0])
    numbers = tokens[1:1 + count]
    if len(numbers) < count:
        raise ValueError(f"expected {count} numbers, got {len(numbers)}")
    counts = digit_counts(numbers)
    return "\n".join(f"{digit} - {total}" for digit, total in enumerate(counts))


def _operation(tokens: list[str]) -> str | None:
    if not tokens:
        raise ValueError("the operation is missing")
    operation, rest = tokens[0][0], tokens[0][1:]
    operands = ([rest] if rest else []) + tokens[1:]
    if len(operands) < 2:
        raise ValueError("two operands are required")
    result = operate(operation, float(operands[0]), float(operands[1]))
    if result is None:
        return None
    return f"{result:.2f}"


_COMMANDS: dict[str, Callable[[list[str]], str | None]] = {
    "senha": _password,
    "algarismos": _digits,
    "operacoes": _operation,
}


def main(argv: list[str] | None = None) -> int:
    """Run one problem on the data given on standard input."""
    parser = argparse.ArgumentParser(
        prog="olimpiada", description="Solve a problem reading from standard input."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("senha", help="count attempts before the code 2018")
    commands.add_parser("algarismos", help="count the digits of N numbers")
    commands.add_parser("operacoes", help="multiply (M) or divide (D) two numbers")
    args = parser.parse_args(argv)
    try:
        output = _COMMANDS[args.command](sys.stdin.read().split())
    except ValueError as error:
        print(f"olimpiada: {error}", file=sys.stderr)
        return 1
    if output is not None:
        print(output)
    return 0