"""Lexical headline similarity."""

import re
from collections import Counter

_WHITESPACE = re.compile(r"\s+")


def _normalize(text: str) -> str:
    return _WHITESPACE.sub("", text.lower())


def _bigrams(text: str) -> Counter:
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def similarity(a: str, b: str) -> float:
    """
    Dice coefficient over character bigrams, in [0, 1].

    Comparison ignores case and whitespace. Bigrams are counted as a
    multiset, so a repeated bigram only matches as often as it occurs
    in both strings:

        2 * |shared bigrams| / (|bigrams(a)| + |bigrams(b)|)

    Identical strings score 1.0 (including empty ones); otherwise a
    string with fewer than two characters has no bigrams and scores 0.0.
    """
    first = _normalize(a)
    second = _normalize(b)

    if first == second:
        return 1.0
    if len(first) < 2 or len(second) < 2:
        return 0.0

    shared = sum((_bigrams(first) & _bigrams(second)).values())
    return (2.0 * shared) / (len(first) + len(second) - 2)
