"""Greet a user by name."""

from __future__ import annotations

import sys


def greet(name: str) -> str:
    """Return the greeting for name."""
    return f"Hello {name}"


def main(argv: list[str] | None = None) -> int:
    """Greet the name given as an argument, or the first word read from stdin."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        name = args[0]
    else:
        words = sys.stdin.read().split()
        name = words[0] if words else ""
    sys.stdout.write(greet(name))
    return 0