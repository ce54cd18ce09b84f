"""Helper functions for ingest_articles."""

from __future__ import annotations

import logging

from ingest_articles.fetch_articles.sources import RSS_SOURCES, SOURCES_BY_NAME
from ingest_articles.models import FeedSource

logger = logging.getLogger(__name__)


def parse_sources(value: str | None) -> list[FeedSource]:
    '''Parse a --sources argument into the feeds to fetch.'''

    # If no value is provided or if "all" is specified, return all sources
    if not value or value.strip().lower() == "all":
        return list(RSS_SOURCES)

    # Parse comma-separated source names, keeping only valid ones
    parsed = [s.strip() for s in value.split(",") if s.strip() and s.strip().lower() != "all"]

    # Log any invalid sources
    for name in parsed:
        if name not in SOURCES_BY_NAME:
            logger.warning("Invalid source: %s", name)

    sources = [SOURCES_BY_NAME[name] for name in parsed if name in SOURCES_BY_NAME]

    # Raise an error if no valid sources were provided
    if not sources:
        raise ValueError(f"No valid sources provided. Valid sources: {', '.join(sorted(SOURCES_BY_NAME))}")

    return sources
