"""Headline keyword extraction used as a coarse grouping key."""

import re
from collections import Counter

MIN_KEYWORD_LENGTH = 4

STOPWORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
    "be", "have", "has", "had", "do", "does", "did", "will", "would",
    "could", "should", "may", "might", "must", "can", "about", "after",
    "says", "new", "just", "said", "also", "more", "than", "other",
})

_NON_WORD = re.compile(r"[^\w\s]")


def tokenize(text: str) -> list[str]:
    """Lowercase, drop punctuation and split on whitespace."""
    return _NON_WORD.sub("", text.lower()).split()


def extract_keywords(text: str, limit: int = 5) -> list[str]:
    """
    Return the `limit` most frequent salient tokens of `text`.

    Tokens shorter than four characters and stopwords are discarded.
    Ties keep first-occurrence order. Empty or non-string input
    yields an empty list.
    """
    if not text or not isinstance(text, str):
        return []

    words = [
        word for word in tokenize(text)
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOPWORDS
    ]
    # most_common sorts stably, so equal counts stay in insertion order
    return [word for word, _ in Counter(words).most_common(limit)]
