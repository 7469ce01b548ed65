"""Reading and displaying one-, two- and three-dimensional integer arrays."""

from __future__ import annotations

import itertools
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TextIO

_MAX_RANK = 3


def build_array(shape: Sequence[int], values: Iterable[int]) -> list[Any]:
    """Arrange values, in row-major order, into nested lists of the given shape."""
    dims = tuple(shape)
    if not 1 <= len(dims) <= _MAX_RANK:
        raise ValueError(f"arrays have 1 to {_MAX_RANK} dimensions, not {len(dims)}")
    if any(dim < 0 for dim in dims):
        raise ValueError("dimensions must be non-negative")
    items = list(values)
    if len(items) != _size(dims):
        raise ValueError(f"shape {dims} needs {_size(dims)} values, got {len(items)}")
    source = iter(items)

    def nest(rest: tuple[int, ...]) -> list[Any]:
        if len(rest) == 1:
            return [next(source) for _ in range(rest[0])]
        return [nest(rest[1:]) for _ in range(rest[0])]

    return nest(dims)


def _size(dims: tuple[int, ...]) -> int:
    total = 1
    for dim in dims:
        total *= dim
    return total


def _rank(array: list[Any]) -> int:
    rank = 1
    level = array
    while level and isinstance(level[0], list):
        rank += 1
        level = level[0]
    return rank


def _row(row: Iterable[int]) -> str:
    return "".join(f"{value}\t" for value in row) + "\n"


def format_array(array: list[Any]) -> str:
    """Render an array the way the display program prints it."""
    rank = _rank(array)
    if rank == 1:
        return "The array: " + _row(array)
    if rank == 2:
        return "The array:\n" + "".join(_row(row) for row in array)
    if rank == 3:
        layers = (
            f"Depth {index}:\n" + "".join(_row(row) for row in layer) + "\n"
            for index, layer in enumerate(array)
        )
        return "\nThe 3D array:\n" + "".join(layers)
    raise ValueError(f"arrays have at most {_MAX_RANK} dimensions")


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _read_dims(tokens: Iterator[str], stdout: TextIO, prompts: Sequence[str]) -> tuple[int, ...]:
    dims = []
    for prompt in prompts:
        stdout.write(prompt)
        dim = _read_int(tokens)
        if dim < 0:
            raise ValueError("dimensions must be non-negative")
        dims.append(dim)
    return tuple(dims)


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Ask for an array's kind, size and elements, then display it."""
    tokens = _tokens(stdin)
    stdout.write("What kind of Array do you want? 1.1D\t 2.2D\t 3.3D\n")
    kind = _read_int(tokens)

    if kind == 1:
        dims = _read_dims(tokens, stdout, ["Enter length of array: "])
        stdout.write("Enter elements of the array:\n")
        values = [_read_int(tokens) for _ in range(dims[0])]
    elif kind == 2:
        dims = _read_dims(tokens, stdout, ["Enter rows: ", "Enter columns: "])
        values = []
        for _ in range(dims[0]):
            for _ in range(dims[1]):
                values.append(_read_int(tokens))
                stdout.write("\t")
            stdout.write("\n")
    elif kind == 3:
        dims = _read_dims(tokens, stdout, ["Enter depth: ", "Enter rows: ", "Enter columns: "])
        stdout.write("Enter elements:\n")
        values = []
        for i, j, k in itertools.product(*(range(dim) for dim in dims)):
            stdout.write(f"Element at [{i}][{j}][{k}]: ")
            values.append(_read_int(tokens))
    else:
        stdout.write("Invalid choice!\n")
        return

    stdout.write(format_array(build_array(dims, values)))


def main(argv: list[str] | None = None) -> int:
    """Run the array program on standard input and output."""
    try:
        run(sys.stdin, sys.stdout)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0