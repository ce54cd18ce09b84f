"""Exact and near-duplicate title removal ahead of grouping."""

import logging
from typing import Sequence

from deduplicate_articles.similarity import similarity
from ingest_articles.models import RawArticle

logger = logging.getLogger(__name__)

NEAR_DUPLICATE_THRESHOLD = 0.98


def filter_exact_and_near_duplicate_titles(
    articles: Sequence[RawArticle],
    threshold: float = NEAR_DUPLICATE_THRESHOLD,
) -> list[RawArticle]:
    """
    Drop re-publishes of the same headline, keeping the first occurrence.

    Pass 1 collapses titles that are identical once trimmed and lowercased.
    Pass 2 drops any remaining article whose title scores at least
    `threshold` against an article already kept. Input order is preserved.
    """
    by_title: dict[str, RawArticle] = {}
    for article in articles:
        by_title.setdefault(article.title.strip().lower(), article)

    kept: list[RawArticle] = []
    for article in by_title.values():
        title = article.title.lower()
        if any(similarity(title, existing.title.lower()) >= threshold for existing in kept):
            continue
        kept.append(article)

    removed = len(articles) - len(kept)
    if removed:
        logger.info("Removed %d exact or near-duplicate titles", removed)
    return kept
