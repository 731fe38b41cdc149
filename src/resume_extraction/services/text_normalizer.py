"""Comparison helpers for checking extracted values against document text.

Both functions work on throwaway copies; the original text is never altered.
"""

import re

_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Lower-case and collapse whitespace runs to single spaces."""
    return _WHITESPACE.sub(" ", text).strip().lower()


def contains_verbatim(haystack: str, needle: str | None) -> bool:
    """Return True if ``needle`` occurs in ``haystack``, ignoring case and spacing.

    Blank needles never match, so an empty value cannot pass as verified.
    """
    if not needle:
        return False
    normalized_needle = normalize(needle)
    if not normalized_needle:
        return False
    return normalized_needle in normalize(haystack)
