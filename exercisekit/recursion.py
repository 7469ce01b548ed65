"""Classic recursion exercises: sums, factorials, Fibonacci numbers, reversal."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterator


def summation(n: int) -> int:
    """Return the sum of all integers from 1 to n."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return sum(range(1, n + 1))


def factorial(n: int) -> int:
    """Return n!."""
    if n < 0:
        raise ValueError("Error! Factorial of a negative number doesn't exist.")
    return math.prod(range(2, n + 1))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting from fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_series(count: int) -> Iterator[int]:
    """Yield the first count Fibonacci numbers."""
    current, following = 0, 1
    for _ in range(count):
        yield current
        current, following = following, current + following


def reverse_string(text: str) -> str:
    """Return text with its characters in reverse order."""
    return text[::-1]


def _number(value: str | None, prompt: str) -> int:
    return int(value if value is not None else input(prompt))


def main(argv: list[str] | None = None) -> int:
    """Run one of the exercises from the command line."""
    parser = argparse.ArgumentParser(description="Recursion exercises.")
    parser.add_argument("exercise", choices=["sum", "factorial", "fibonacci", "reverse"])
    parser.add_argument("value", nargs="?")
    args = parser.parse_args(argv)

    if args.exercise == "sum":
        n = _number(args.value, "Enter number till which you want sum of:")
        try:
            print(f"Sum of all numbers till {n} is:{summation(n)}")
        except ValueError as exc:
            print(exc)
            return 1
    elif args.exercise == "factorial":
        n = _number(args.value, "Enter a non-negative number to find its factorial: ")
        try:
            print(f"Factorial of {n} is {factorial(n)}.")
        except ValueError as exc:
            print(exc)
            return 1
    elif args.exercise == "fibonacci":
        count = _number(args.value, "Enter the number of terms for the Fibonacci series: ")
        print("".join(f"{term}\t" for term in fibonacci_series(count)))
    else:
        text = args.value if args.value is not None else input("Enter string to reverse:")
        print(reverse_string(text))
    return 0