"""String problems: word reversal and nearest palindromic number."""

from __future__ import annotations


def reverse_words(s: str) -> str:
    """Words of ``s`` in reverse order, separated by single spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def nearest_palindromic(n: str) -> str:
    """The palindrome closest to the integer ``n``, excluding ``n`` itself.

    Ties go to the smaller palindrome.
    """
    length = len(n)
    number = int(n)
    candidates = [10 ** (length - 1) - 1, 10**length + 1]

    prefix = int(n[: (length + 1) // 2])
    for shift in (-1, 0, 1):
        head = str(prefix + shift)
        candidates.append(int(head + head[: length // 2][::-1]))

    return str(
        min(
            (c for c in candidates if c != number),
            key=lambda c: (abs(c - number), c),
        )
    )