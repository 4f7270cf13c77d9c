"""String exercises: digit-wise addition, palindromes and character counts."""

from __future__ import annotations

import string
from collections.abc import Iterable
from itertools import zip_longest

_DECIMAL = frozenset(string.digits)


def add_reversed_decimal(a: str, b: str) -> str:
    """Add two numbers written with their least significant digit first.

    The sum is written the same way, with no trailing zeros.
    """
    if not set(a + b) <= _DECIMAL:
        raise ValueError("numbers must consist of decimal digits only")
    digits = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue="0"):
        total = int(x) + int(y) + carry
        digits.append(str(total % 10))
        carry = total // 10
    if carry:
        digits.append(str(carry))
    return "".join(digits).rstrip("0") or "0"


def add_binary(a: Iterable[int], b: Iterable[int]) -> str:
    """Add two bit sequences given most significant bit first.

    Entries other than 0 and 1 count as 0. Leading zeros of the longer
    input are kept; a final carry adds one more digit.
    """
    first = [bit if bit in (0, 1) else 0 for bit in reversed(list(a))]
    second = [bit if bit in (0, 1) else 0 for bit in reversed(list(b))]
    result = []
    carry = 0
    for x, y in zip_longest(first, second, fillvalue=0):
        total = x + y + carry
        result.append(total % 2)
        carry = total // 2
    if carry:
        result.append(carry)
    return "".join(str(bit) for bit in reversed(result))


def palindrome_line(word: str) -> str:
    """Return 'w==w' for a palindrome, otherwise 'w!=<w reversed>'."""
    flipped = word[::-1]
    if word == flipped:
        return f"{word}=={word}"
    return f"{word}!={flipped}"


def count_posts(posts: Iterable[str], author: str) -> int:
    """Count the non-empty posts signed by author."""
    return sum(1 for post in posts if post and post == author)


def line_stats(line: str) -> tuple[int, int, int]:
    """Return the length of line, its ASCII letters and its decimal digits."""
    letters = sum(1 for ch in line if ch in string.ascii_letters)
    digits = sum(1 for ch in line if ch in string.digits)
    return len(line), letters, digits