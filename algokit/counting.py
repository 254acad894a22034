"""Hash-based counting over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value appears at least twice."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Return True if two equal values sit at most ``k`` positions apart."""
    last_index: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_index and index - last_index[value] <= k:
            return True
        last_index[value] = index
    return False


def frequency_count(values: Sequence[int]) -> list[int]:
    """Return how often each of 1..len(values) occurs in ``values``."""
    counts = Counter(values)
    return [counts[number] for number in range(1, len(values) + 1)]