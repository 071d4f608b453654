from __future__ import annotations

import re

from config import CORRECT_THRESHOLD, MAX_SCORED_LENGTH

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lower-case, drop punctuation and collapse whitespace."""
    text = _NON_WORD_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub(" ", text).strip()


def levenshtein_distance(a: str, b: str) -> int:
    """Return the minimum number of single-character edits turning *a* into *b*."""
    if a == b:
        return 0
    # keep the shorter string along the row
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def calculate_similarity(
    reference: str,
    candidate: str,
    max_length: int | None = None,
) -> int:
    """
    Return how closely *candidate* matches *reference* as an integer 0-100.

    Both strings are normalised first, so case, punctuation and spacing
    do not count. Normalised input longer than *max_length* (default
    MAX_SCORED_LENGTH) is truncated before scoring. Two strings that
    normalise to empty are identical (100). Halves round up.

    Raises ValueError if *max_length* is less than 1.
    """
    limit = MAX_SCORED_LENGTH if max_length is None else max_length
    if limit < 1:
        raise ValueError(f"max_length must be at least 1, got {limit}")
    a = normalize_text(reference)[:limit]
    b = normalize_text(candidate)[:limit]

    longest = max(len(a), len(b))
    if longest == 0:
        return 100

    distance = levenshtein_distance(a, b)
    return (200 * (longest - distance) + longest) // (2 * longest)


def is_correct(similarity: int, threshold: int = CORRECT_THRESHOLD) -> bool:
    """Map a similarity percentage to a pass/fail verdict."""
    return similarity >= threshold
