"""Group near-duplicate articles from different feeds into story groups."""

from __future__ import annotations

import logging
from typing import Sequence

from deduplicate_articles.config import DedupConfig, get_config
from deduplicate_articles.keywords import extract_keywords
from deduplicate_articles.merge import StoryGroupBuilder, merge_into, singleton_group
from deduplicate_articles.models import StoryGroup
from deduplicate_articles.prefilter import filter_exact_and_near_duplicate_titles
from deduplicate_articles.similarity import similarity
from ingest_articles.models import RawArticle

logger = logging.getLogger(__name__)


def bucket_key(title: str, keyword_limit: int = 3) -> str:
    """Sorted top keywords of a title. Titles without keywords share the empty key."""
    return " ".join(sorted(extract_keywords(title, keyword_limit)))


def _build_buckets(articles: Sequence[RawArticle], keyword_limit: int) -> dict[str, list[int]]:
    buckets: dict[str, list[int]] = {}
    for index, article in enumerate(articles):
        buckets.setdefault(bucket_key(article.title, keyword_limit), []).append(index)
    return buckets


def _is_match(anchor: RawArticle, candidate: RawArticle, config: DedupConfig) -> bool:
    if abs(candidate.pub_date - anchor.pub_date) >= config.time_window:
        return False
    return similarity(anchor.title, candidate.title) >= config.similarity_threshold


def _group(articles: Sequence[RawArticle], config: DedupConfig) -> list[StoryGroup]:
    filtered = filter_exact_and_near_duplicate_titles(articles, config.near_duplicate_threshold)

    # Newest first: the anchor of every group is its most recent member
    ordered = sorted(filtered, key=lambda article: article.pub_date, reverse=True)
    buckets = _build_buckets(ordered, config.keyword_limit)

    processed = [False] * len(ordered)
    groups: list[StoryGroup] = []

    for bucket in buckets.values():
        for position, index in enumerate(bucket):
            if processed[index]:
                continue

            anchor = ordered[index]
            builder = StoryGroupBuilder(anchor)

            # Candidates are compared with the anchor only, never with merged members
            for other in bucket[position + 1:]:
                if processed[other] or not _is_match(anchor, ordered[other], config):
                    continue
                merge_into(builder, ordered[other])
                processed[other] = True

            processed[index] = True
            groups.append(builder.build())

    ungrouped = processed.count(False)
    if ungrouped:
        raise RuntimeError(f"{ungrouped} articles were not assigned to a story group")

    logger.info(
        "Deduplicated %d articles into %d groups (%d before title filtering)",
        len(ordered),
        len(groups),
        len(articles),
    )
    return groups


def _as_singletons(articles: Sequence[RawArticle]) -> list:
    try:
        return [singleton_group(article) for article in articles]
    except Exception as e:
        logger.error("Could not wrap articles as singleton groups: %s", e)
        return list(articles)


def group_articles(
    articles: Sequence[RawArticle],
    config: DedupConfig | None = None,
) -> list[StoryGroup]:
    """
    Collapse articles covering the same event into story groups.

    Args:
        articles: Raw articles from one ingestion run.
        config: Grouping parameters (default: the process-wide config from get_config()).

    Returns:
        One StoryGroup per anchor article, in the order anchors were found.
        Every article that survives title filtering lands in exactly one group.

    Grouping never raises. If it fails part way, the error is logged and
    every input article, unfiltered, is returned as its own singleton group.
    """
    if not articles or not isinstance(articles, (list, tuple)):
        return []

    try:
        return _group(articles, config or get_config())
    except Exception as e:
        logger.error("Error grouping %d articles, returning them ungrouped: %s", len(articles), e)
        return _as_singletons(articles)
