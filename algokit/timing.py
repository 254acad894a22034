"""Measure the running time of an empty triple-nested loop."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence


def time_nested_loops(outer: int = 10000, middle: int = 10000, inner: int = 1000) -> float:
    """Run empty nested loops of the given sizes and return the elapsed seconds."""
    start = time.perf_counter()
    for _ in range(outer):
        for _ in range(middle):
            for _ in range(inner):
                pass
    return time.perf_counter() - start


def main(argv: Sequence[str] | None = None) -> int:
    """Time the nested loops and print the result."""
    parser = argparse.ArgumentParser(description="Time an empty triple-nested loop.")
    parser.add_argument("--outer", type=int, default=10000)
    parser.add_argument("--middle", type=int, default=10000)
    parser.add_argument("--inner", type=int, default=1000)
    args = parser.parse_args(argv)
    elapsed = time_nested_loops(args.outer, args.middle, args.inner)
    print(f"Execution time for the for loop: {elapsed:g} seconds")
    return 0