"""A menu-driven four-function calculator."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterator
from typing import TextIO

_MENU = (
    "\n====== Simple Calculator ======\n"
    "1. Addition (+)\n"
    "2. Subtraction (-)\n"
    "3. Multiplication (*)\n"
    "4. Division (/)\n"
    "5. Exit\n"
    "Enter your choice: "
)
_EXIT_CHOICE = 5


class CalculatorError(ValueError):
    """Raised when a calculation cannot be performed."""


class Operation(enum.IntEnum):
    """Calculator operations, numbered as on the menu."""

    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4

    @property
    def symbol(self) -> str:
        return "+-*/"[self.value - 1]


def calculate(operation: Operation, left: float, right: float) -> float:
    """Apply an operation to two numbers."""
    operation = Operation(operation)
    if operation is Operation.ADD:
        return left + right
    if operation is Operation.SUBTRACT:
        return left - right
    if operation is Operation.MULTIPLY:
        return left * right
    if right == 0:
        raise CalculatorError("Error! Division by zero not allowed.")
    return left / right


def format_result(operation: Operation, left: float, right: float, result: float) -> str:
    """Render a calculation the way the calculator reports it."""
    return f"Result: {left:.2f} {Operation(operation).symbol} {right:.2f} = {result:.2f}"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Run the interactive calculator until the user exits or input ends."""
    tokens = _tokens(stdin)
    while True:
        stdout.write(_MENU)
        token = next(tokens, None)
        if token is None:
            return
        try:
            choice = int(token)
        except ValueError:
            choice = 0
        if choice == _EXIT_CHOICE:
            stdout.write("Exiting calculator. Goodbye!\n")
            return
        if choice not in Operation._value2member_map_:
            stdout.write("Invalid choice! Please try again.\n")
            continue
        operation = Operation(choice)
        stdout.write("Enter two numbers: ")
        first, second = next(tokens, None), next(tokens, None)
        if first is None or second is None:
            return
        try:
            left, right = float(first), float(second)
        except ValueError:
            stdout.write("Invalid number! Please try again.\n")
            continue
        try:
            result = calculate(operation, left, right)
        except CalculatorError as exc:
            stdout.write(f"{exc}\n")
            continue
        stdout.write(format_result(operation, left, right, result) + "\n")


def main(argv: list[str] | None = None) -> int:
    """Run the calculator on standard input and output."""
    run(sys.stdin, sys.stdout)
    return 0