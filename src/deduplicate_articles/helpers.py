"""Helper functions for deduplicate_articles CLI."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Iterable

from common.cli_helpers import parse_fraction, parse_positive_float
from common.datetime import ensure_utc, parse_datetime
from common.hashing import generate_hash
from common.local_io import read_jsonl_local
from common.utils import first_value
from ingest_articles.models import Category, RawArticle

logger = logging.getLogger(__name__)


def article_from_record(record: Any) -> RawArticle:
    """Build a RawArticle from a dict or object with camelCase or snake_case fields."""
    link = first_value(record, "link", "url") or ""
    title = first_value(record, "title") or ""
    return RawArticle(
        title=title,
        description=first_value(record, "description") or "",
        link=link,
        pub_date=ensure_utc(parse_datetime(first_value(record, "pub_date", "pubDate"))),
        source=first_value(record, "source") or "",
        category=Category(first_value(record, "category") or Category.GENERAL.value),
        image_url=first_value(record, "image_url", "imageUrl"),
        original_id=first_value(record, "original_id", "originalId") or generate_hash(link or title),
    )


def load_articles(records: Iterable[Any]) -> list[RawArticle]:
    """Convert records to RawArticles, skipping ones that cannot be parsed."""
    articles = []
    for record in records:
        try:
            articles.append(article_from_record(record))
        except (TypeError, ValueError) as e:
            logger.warning("Skipping unparseable article record: %s", e)
    return articles


def load_articles_from_jsonl(path: str | Path) -> list[RawArticle]:
    """Load raw articles from a local JSONL dump."""
    articles = load_articles(read_jsonl_local(path))
    logger.info("Loaded %d articles from %s", len(articles), path)
    return articles


def parse_deduplicate_articles_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for deduplicate_articles."""

    parser = argparse.ArgumentParser()

    # Input options
    parser.add_argument(
        "--input",
        required=True,
        type=Path,
        help="JSONL file of raw articles to group",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ (default: $PIPELINE_CONFIG or prod)",
    )

    # Grouping options
    parser.add_argument(
        "--similarity-threshold",
        type=lambda v: parse_fraction(v, "similarity-threshold"),
        default=None,
        help="Minimum title similarity to merge (overrides config)",
    )
    parser.add_argument(
        "--time-window-hours",
        type=lambda v: parse_positive_float(v, "time-window-hours"),
        default=None,
        help="Maximum publish time difference to merge (overrides config)",
    )

    # Output options
    parser.add_argument("--load-local", action="store_true", help="Save story groups to local file")
    parser.add_argument("--output-dir", default="output", help="Directory for --load-local")

    return parser.parse_args(argv)
