"""Collect the alphabetic words of two lines and order them case-insensitively."""

from __future__ import annotations

import string
import sys
from typing import Sequence

ERROR_EMPTY = "Is empty!"
ERROR_ONLY_DELIMITERS = "Only delimeters!"
MAX_WORDS = 1000

_LETTERS = frozenset(string.ascii_letters)
_UPPER_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def to_lower_case(text: str) -> str:
    """Lower-case the ASCII letters of ``text``, leaving every other character."""
    return text.translate(_UPPER_TO_LOWER)


def get_words(text: str, max_size: int = MAX_WORDS) -> list[str]:
    """Return at most ``max_size`` runs of ASCII letters found in ``text``."""
    words: list[str] = []
    current: list[str] = []
    for ch in text:
        if ch in _LETTERS:
            current.append(ch)
        elif current and len(words) < max_size:
            words.append("".join(current))
            current.clear()
    if current and len(words) < max_size:
        words.append("".join(current))
    return words


def bubble_sort(words: Sequence[str]) -> list[str]:
    """Return a copy of ``words`` after a case-insensitive bubble pass.

    Each pass stops at the first adjacent pair already in order, so the
    result is only fully sorted for some inputs.
    """
    items = list(words)
    size = len(items)
    for i in range(size - 1):
        for j in range(size - i - 1):
            if to_lower_case(items[j]) > to_lower_case(items[j + 1]):
                items[j], items[j + 1] = items[j + 1], items[j]
            else:
                break
    return items


def is_empty(text: str) -> bool:
    """Return True if ``text`` has no characters at all."""
    return len(text) == 0


def only_delimiters(text: str) -> bool:
    """Return True if ``text`` holds no ASCII letter."""
    return not any(ch in _LETTERS for ch in text)


def merge_and_sort(first: str, second: str) -> str:
    """Join the words of both lines, order them and return them space separated.

    Raises ValueError when both lines are empty or both hold no letters.
    """
    if is_empty(first) and is_empty(second):
        raise ValueError(ERROR_EMPTY)
    if only_delimiters(first) and only_delimiters(second):
        raise ValueError(ERROR_ONLY_DELIMITERS)
    words = get_words(first, MAX_WORDS) + get_words(second, MAX_WORDS)
    return " ".join(bubble_sort(words))


def _read_line() -> str:
    return sys.stdin.readline().rstrip("\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Read two lines from standard input and print their words in order.

    ``argv`` is accepted for a uniform entry point; no options are defined.
    """
    print("Input 1st string: ")
    first = _read_line()
    print("Input 2nd string: ")
    second = _read_line()
    print("\n")

    try:
        print(merge_and_sort(first, second))
    except ValueError as exc:
        print(f"{exc}\n", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())