"""Fetch articles from RSS sources for one ingestion run."""

import logging

from ingest_articles.config import IngestConfig
from ingest_articles.fetch_articles.circuit_breaker import (
    CircuitBreaker,
    JsonFileStateStore,
    StateStore,
)
from ingest_articles.fetch_articles.fetch_articles import fetch_articles
from ingest_articles.models import FeedSource, RawArticle

logger = logging.getLogger(__name__)


def build_circuit_breaker(config: IngestConfig, store: StateStore | None = None) -> CircuitBreaker:
    """Circuit breaker backed by `store`, or by the JSON state file from config."""
    return CircuitBreaker(
        store or JsonFileStateStore(config.breaker_state_path),
        failure_threshold=config.failure_threshold,
        timeout_seconds=config.breaker_timeout_seconds,
    )


def ingest_articles(
    sources: list[FeedSource],
    config: IngestConfig,
    store: StateStore | None = None,
) -> list[RawArticle]:
    """Fetch RSS articles from `sources` and return the valid ones."""
    logger.info("Ingesting articles from %d sources", len(sources))

    breaker = build_circuit_breaker(config, store)
    articles, stats = fetch_articles(sources, config, breaker)
    if not articles:
        logger.warning("0 Articles ingested")
        return []

    if stats.failures:
        logger.warning("Sources failed this run: %s", ", ".join(sorted(stats.failures)))

    logger.info("%d Articles ingested", len(articles))
    return articles
