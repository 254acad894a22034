"""Operations on sequences of comparable values."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def next_permutation(nums: Sequence[T]) -> list[T]:
    """Return the lexicographically next permutation of ``nums``.

    If ``nums`` is already the last permutation (non-increasing), the
    first permutation (ascending order) is returned instead. The input
    is left unchanged.
    """
    result = list(nums)
    pivot = next(
        (i - 1 for i in range(len(result) - 1, 0, -1) if result[i] > result[i - 1]),
        -1,
    )
    if pivot != -1:
        swap = next(
            j for j in range(len(result) - 1, pivot, -1) if result[j] > result[pivot]
        )
        result[pivot], result[swap] = result[swap], result[pivot]
    result[pivot + 1:] = reversed(result[pivot + 1:])
    return result