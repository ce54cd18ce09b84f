"""RSS feed fetching."""

import logging
from datetime import datetime, timezone, timedelta
from typing import Iterable

import feedparser
import requests
from dateutil.parser import parse as parse_date

from common.hashing import generate_hash
from ingest_articles.clean_articles.clean import (
    clean_text,
    extract_image_url,
    is_valid_url,
    sanitize_text,
)
from ingest_articles.models import FeedSource, RawArticle

logger = logging.getLogger(__name__)

USER_AGENT = "news-dedup/1.0 (RSS reader)"

# Timezone abbreviations for date parsing
TZINFOS = {
    "EST": timezone(timedelta(hours=-5)),
    "EDT": timezone(timedelta(hours=-4)),
    "CST": timezone(timedelta(hours=-6)),
    "CDT": timezone(timedelta(hours=-5)),
    "MST": timezone(timedelta(hours=-7)),
    "MDT": timezone(timedelta(hours=-6)),
    "PST": timezone(timedelta(hours=-8)),
    "PDT": timezone(timedelta(hours=-7)),
    "GMT": timezone.utc,
    "UTC": timezone.utc,
    "BST": timezone(timedelta(hours=1)),
}


class InvalidFeedError(Exception):
    """Feed response could not be parsed into entries."""


def fetch_rss_articles(source: FeedSource, timeout: float = 30) -> Iterable[RawArticle]:
    """Fetch a source's feed and yield the entries that form valid articles.

    Raises:
        requests.RequestException: If the feed cannot be downloaded.
        InvalidFeedError: If the response is not a parseable feed.
    """
    response = requests.get(
        source.url,
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
    )
    response.raise_for_status()

    feed = feedparser.parse(response.content)
    if feed.get("bozo") and not feed.entries:
        raise InvalidFeedError(f"Invalid feed response from {source.name}: {feed.get('bozo_exception')}")

    for entry in feed.entries:
        try:
            article = _parse_entry(entry, source)
            if article is not None:
                yield article
        except Exception as e:
            logger.warning("Failed to parse entry from %s: %s", source.name, e)
            continue


def _parse_entry(entry, source: FeedSource) -> RawArticle | None:
    """Parse a single RSS entry into a RawArticle, or None if it is incomplete."""
    title = sanitize_text(entry.get("title")).strip()
    link = sanitize_text(entry.get("link"))
    description = clean_text(sanitize_text(_entry_description(entry))) or ""

    if not title or not description or not is_valid_url(link):
        return None

    return RawArticle(
        title=title,
        description=description,
        link=link,
        pub_date=_parse_published_date(entry) or datetime.now(timezone.utc),
        source=source.name,
        category=source.category,
        image_url=extract_image_url(entry),
        original_id=generate_hash(link),
    )


def _entry_description(entry) -> str:
    content = entry.get("content")
    if isinstance(content, list) and content:
        content = content[0].get("value")
    return entry.get("summary") or entry.get("description") or content or ""


def _parse_published_date(entry) -> datetime | None:
    """Extract and parse the published date from an RSS entry."""
    published = entry.get("published") or entry.get("updated")
    if not published:
        return None

    try:
        dt = parse_date(published, tzinfos=TZINFOS)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt
    except (ValueError, OverflowError):
        return None
