"""String drills: subsequences, windows, merging, word order and palindromes."""

from __future__ import annotations

from itertools import zip_longest


def is_subsequence(s: str, t: str) -> bool:
    """Return whether ``s`` can be formed by deleting characters from ``t``."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    best = 0
    left = 0
    for right, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= left:
            left = previous + 1
        last_seen[char] = right
        best = max(best, right - left + 1)
    return best


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the letters of two words, starting with ``word1``.

    Whatever is left of the longer word is appended at the end.
    """
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def reverse_words(s: str) -> str:
    """Reverse the order of space-separated words, joined by single spaces."""
    words = [word for word in s.split(" ") if word]
    return " ".join(reversed(words))


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_palindrome(s: str) -> bool:
    """Palindrome check ignoring case and every non-alphanumeric character."""
    cleaned = [char.lower() for char in s if _is_alnum(char)]
    return cleaned == cleaned[::-1]


def is_simple_palindrome(s: str) -> bool:
    """Exact palindrome check: every character counts, case included."""
    return s == s[::-1]