"""String utilities."""

from __future__ import annotations

import string
from collections import Counter

_LOWERCASE = frozenset(string.ascii_lowercase)


def _require_lowercase(text: str) -> None:
    bad = set(text) - _LOWERCASE
    if bad:
        raise ValueError(f"expected only lowercase letters a-z, got {sorted(bad)!r}")


def defang_ip_address(address: str) -> str:
    """Replace every ``.`` in ``address`` with ``[.]``."""
    return address.replace(".", "[.]")


def longest_unique_substring_length(text: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for index, char in enumerate(text):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def is_pangram(sentence: str) -> bool:
    """Return True if the lowercase ``sentence`` uses every letter a-z."""
    _require_lowercase(sentence)
    return set(sentence) == _LOWERCASE


def sort_letters(text: str) -> str:
    """Return the lowercase letters of ``text`` in alphabetical order."""
    _require_lowercase(text)
    counts = Counter(text)
    return "".join(letter * counts[letter] for letter in string.ascii_lowercase)


def rotate_right(text: str, places: int) -> str:
    """Rotate ``text`` clockwise: the last ``places`` characters move to the front."""
    if not text:
        return text
    shift = places % len(text)
    if not shift:
        return text
    return text[-shift:] + text[:-shift]


def rotate_left(text: str, places: int) -> str:
    """Rotate ``text`` anticlockwise: the first ``places`` characters move to the end."""
    return rotate_right(text, -places)


def is_rotated_by_two(first: str, second: str) -> bool:
    """Return True if ``second`` is ``first`` rotated two places either way."""
    if len(first) != len(second):
        return False
    return rotate_right(first, 2) == second or rotate_left(first, 2) == second