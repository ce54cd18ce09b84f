"""Fetch articles from all configured feeds for one ingestion run."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from ingest_articles.clean_articles.clean import is_valid_rss_url
from ingest_articles.config import IngestConfig
from ingest_articles.fetch_articles.circuit_breaker import CircuitBreaker
from ingest_articles.fetch_articles.fetch_rss_articles import fetch_rss_articles
from ingest_articles.models import FeedSource, RawArticle

logger = logging.getLogger(__name__)


@dataclass
class FetchStats:
    processed: int = 0
    failed: int = 0
    skipped: int = 0
    failures: dict[str, str] = field(default_factory=dict)


def fetch_from_source(
    source: FeedSource,
    breaker: CircuitBreaker,
    timeout: float = 30,
) -> list[RawArticle]:
    """Fetch one source, updating its breaker. Raises on fetch failure.

    A source with an invalid feed URL counts as a breaker failure and
    yields no articles.
    """
    if not is_valid_rss_url(source.url):
        breaker.record_failure(source.name)
        logger.warning("Invalid RSS URL for %s: %s", source.name, source.url)
        return []

    logger.info("Fetching articles from %s", source.name)
    try:
        articles = list(fetch_rss_articles(source, timeout))
    except Exception:
        breaker.record_failure(source.name)
        raise

    breaker.record_success(source.name)
    logger.info("Found %d valid articles from %s", len(articles), source.name)
    return articles


def fetch_articles(
    sources: list[FeedSource],
    config: IngestConfig,
    breaker: CircuitBreaker,
    sleep=time.sleep,
    monotonic=time.monotonic,
) -> tuple[list[RawArticle], FetchStats]:
    """
    Fetch sources in concurrent batches of `config.fetch_batch_size`.

    Open circuits are skipped, a failing source never aborts the run,
    and no new batch starts once `config.max_processing_seconds` has passed.
    """
    articles: list[RawArticle] = []
    stats = FetchStats()
    started = monotonic()
    batch_size = config.fetch_batch_size
    batch_count = (len(sources) + batch_size - 1) // batch_size

    for batch_number, start in enumerate(range(0, len(sources), batch_size), start=1):
        if monotonic() - started > config.max_processing_seconds:
            logger.warning("Processing time limit reached, stopping RSS feed processing")
            break

        batch = sources[start:start + batch_size]
        runnable = []
        for source in batch:
            if breaker.should_skip(source.name):
                stats.skipped += 1
            else:
                runnable.append(source)

        logger.info("Processing batch %d/%d with %d sources", batch_number, batch_count, len(runnable))
        with ThreadPoolExecutor(max_workers=batch_size) as executor:
            futures = {
                source.name: executor.submit(
                    fetch_from_source, source, breaker, config.request_timeout_seconds
                )
                for source in runnable
            }
            for name, future in futures.items():
                try:
                    fetched = future.result()
                except Exception as e:
                    logger.error("Failed to fetch RSS from %s: %s", name, e)
                    stats.failed += 1
                    stats.failures[name] = str(e)
                    continue
                if fetched:
                    stats.processed += 1
                else:
                    stats.skipped += 1
                articles.extend(fetched)

        if batch_number < batch_count:
            sleep(config.batch_delay_seconds)

    logger.info(
        "RSS feed processing completed: %d processed, %d failed, %d skipped, %d total articles",
        stats.processed,
        stats.failed,
        stats.skipped,
        len(articles),
    )
    return articles, stats
