"""Subsequence fuzzy matching used to filter cards by name."""

from __future__ import annotations


def fuzzy_match(needle: str | None, haystack: str) -> bool:
    """Return True if every character of *needle* occurs in *haystack* in order.

    Matching is case-insensitive and the characters need not be contiguous:
    ``"ac"`` matches ``"abcabc"`` but ``"cab"`` does not match ``"abc"``.
    An empty or missing needle matches everything.
    """
    if not needle:
        return True

    remaining = iter(haystack.lower())
    # `in` on an iterator consumes it up to and including the match
    return all(char in remaining for char in needle.lower())
