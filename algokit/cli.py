"""Command-line drivers that read problem input and print answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from algokit.counting import frequency_count
from algokit.matrix import add_matrices, diagonal_sum, wave_order
from algokit.sequences import next_permutation
from algokit.strings import is_rotated_by_two, sort_letters


class _Tokens:
    """Whitespace-separated input tokens."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def matrix(self, rows: int, cols: int) -> list[list[int]]:
        return [[self.integer() for _ in range(cols)] for _ in range(rows)]


def _parse_ints(line: str) -> list[int]:
    try:
        return [int(word) for word in line.split()]
    except ValueError:
        raise ValueError(f"expected integers, got {line!r}") from None


def _case_lines(text: str) -> list[str]:
    """Return the per-case lines that follow a leading case count."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("unexpected end of input")
    try:
        count = int(lines[0].strip())
    except ValueError:
        raise ValueError(f"expected a case count, got {lines[0]!r}") from None
    body = lines[1:1 + max(count, 0)]
    return body + [""] * (max(count, 0) - len(body))


def _next_permutation(text: str, out: TextIO) -> None:
    for line in _case_lines(text):
        out.write("".join(f"{value} " for value in next_permutation(_parse_ints(line))))
        out.write("\n")


def _frequency(text: str, out: TextIO) -> None:
    for line in _case_lines(text):
        result = frequency_count(_parse_ints(line))
        out.write(" ".join(map(str, result)) if result else "[]")
        out.write("\n")


def _sort_string(text: str, out: TextIO) -> None:
    tokens = _Tokens(text)
    for _ in range(tokens.integer()):
        out.write(f"{sort_letters(tokens.word())}\n~\n")


def _rotated(text: str, out: TextIO) -> None:
    tokens = _Tokens(text)
    for _ in range(tokens.integer()):
        first, second = tokens.word(), tokens.word()
        out.write(f"{'true' if is_rotated_by_two(first, second) else 'false'}\n~\n")


def _add_matrix(text: str, out: TextIO) -> None:
    tokens = _Tokens(text)
    for _ in range(tokens.integer()):
        n = tokens.integer()
        first = tokens.matrix(n, n)
        second = tokens.matrix(n, n)
        for row in add_matrices(first, second):
            out.write("".join(f"{value} " for value in row) + "\n")
        out.write("~\n")


def _diagonal_sum(text: str, out: TextIO) -> None:
    tokens = _Tokens(text)
    for _ in range(tokens.integer()):
        n = tokens.integer()
        out.write(f"{diagonal_sum(tokens.matrix(n, n))}\n~\n")


def _wave(text: str, out: TextIO) -> None:
    tokens = _Tokens(text)
    rows, cols = tokens.integer(), tokens.integer()
    out.write("".join(f"{value} " for value in wave_order(tokens.matrix(rows, cols))))


_COMMANDS: dict[str, Callable[[str, TextIO], None]] = {
    "next-permutation": _next_permutation,
    "frequency": _frequency,
    "sort-string": _sort_string,
    "rotated": _rotated,
    "add-matrix": _add_matrix,
    "diagonal-sum": _diagonal_sum,
    "wave": _wave,
}


def run(command: str, stdin: TextIO, stdout: TextIO) -> None:
    """Read input for ``command`` from ``stdin`` and write its answers to ``stdout``."""
    try:
        handler = _COMMANDS[command]
    except KeyError:
        raise ValueError(f"unknown command: {command!r}") from None
    handler(stdin.read(), stdout)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: run one driver over standard input."""
    parser = argparse.ArgumentParser(description="Solve problems read from standard input.")
    parser.add_argument("command", choices=sorted(_COMMANDS))
    args = parser.parse_args(argv)
    try:
        run(args.command, sys.stdin, sys.stdout)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0