"""Infix to postfix/prefix conversion and evaluation of single-digit expressions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable

_MIRROR = {"(": ")", ")": "("}


class ExpressionError(ValueError):
    """Raised when an expression is malformed or cannot be evaluated."""


def precedence(operator: str) -> int:
    """Return the binding strength of an operator; -1 for anything else."""
    if operator == "^":
        return 3
    if operator in "*/" and operator:
        return 2
    if operator in "+-" and operator:
        return 1
    return -1


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _shunt(expression: Iterable[str]) -> str:
    output: list[str] = []
    stack: list[str] = []
    for ch in expression:
        if ch.isspace():
            continue
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unbalanced parentheses")
            stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
    while stack:
        operator = stack.pop()
        if operator == "(":
            raise ExpressionError("unbalanced parentheses")
        output.append(operator)
    return "".join(output)


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    return _shunt(infix)


def infix_to_prefix(infix: str) -> str:
    """Convert an infix expression of single-character operands to prefix."""
    mirrored = (_MIRROR.get(ch, ch) for ch in reversed(infix))
    return _shunt(mirrored)[::-1]


def _divide(left: int, right: int) -> int:
    if right == 0:
        raise ExpressionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
}


def _evaluate(symbols: Iterable[str], top_is_left: bool) -> int:
    stack: list[int] = []
    for ch in symbols:
        if ch.isspace():
            continue
        if ch.isascii() and ch.isdigit():
            stack.append(int(ch))
            continue
        operation = _OPERATIONS.get(ch)
        if operation is None:
            raise ExpressionError(f"unknown operator {ch!r}")
        if len(stack) < 2:
            raise ExpressionError("stack underflow: missing operand")
        first, second = stack.pop(), stack.pop()
        left, right = (first, second) if top_is_left else (second, first)
        stack.append(operation(left, right))
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single value")
    return stack[0]


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands."""
    return _evaluate(expression, top_is_left=False)


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single-digit operands."""
    return _evaluate(reversed(expression), top_is_left=True)


_MODES = {
    "to-postfix": ("Enter an infix expression: ", infix_to_postfix, "Postfix expression: {}"),
    "to-prefix": ("Enter an infix expression: ", infix_to_prefix, "The prefix expression is: {}"),
    "eval-postfix": ("Enter a postfix expression: ", evaluate_postfix, "Result = {}"),
    "eval-prefix": ("Enter a prefix expression: ", evaluate_prefix, "Result = {}"),
}


def main(argv: list[str] | None = None) -> int:
    """Convert or evaluate an expression given on the command line or stdin."""
    parser = argparse.ArgumentParser(description="Convert and evaluate expressions.")
    parser.add_argument("mode", choices=sorted(_MODES))
    parser.add_argument("expression", nargs="?")
    args = parser.parse_args(argv)
    prompt, action, template = _MODES[args.mode]
    expression = args.expression
    if expression is None:
        words = input(prompt).split()
        expression = words[0] if words else ""
    try:
        result = action(expression)
    except ExpressionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(template.format(result))
    return 0