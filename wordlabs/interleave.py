"""Interleave the words of two lines: first word of each line, then second, and so on."""

from __future__ import annotations

import string
import sys
from itertools import zip_longest
from typing import Sequence

ERROR_EMPTY = "Is empty!"
ERROR_ONLY_DELIMITERS = "Only delimeters!"

_ALNUM = frozenset(string.ascii_letters + string.digits)


def get_words(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty pieces."""
    return [word for word in text.split(" ") if word]


def is_empty(text: str) -> bool:
    """Return True if ``text`` has no characters at all."""
    return text == ""


def only_delimiters(text: str) -> bool:
    """Return True if ``text`` holds no ASCII letter or digit."""
    return not any(ch in _ALNUM for ch in text)


def interleave_words(first: str, second: str) -> str:
    """Alternate the words of ``first`` and ``second``, joined by single spaces.

    Raises ValueError when both lines are empty or both hold only delimiters.
    """
    if is_empty(first) and is_empty(second):
        raise ValueError(ERROR_EMPTY)
    if only_delimiters(first) and only_delimiters(second):
        raise ValueError(ERROR_ONLY_DELIMITERS)

    result: list[str] = []
    for left, right in zip_longest(get_words(first), get_words(second)):
        if left is not None:
            result.append(left)
        if right is not None:
            result.append(right)
    return " ".join(result)


def _read_line() -> str:
    return sys.stdin.readline().rstrip("\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Read two lines from standard input and print their interleaved words.

    ``argv`` is accepted for a uniform entry point; no options are defined.
    """
    print("Input 1st string: ")
    first = _read_line()
    print("Input 2nd string: ")
    second = _read_line()
    print("\n")

    try:
        print(interleave_words(first, second))
    except ValueError as exc:
        print(f"{exc}\n", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())