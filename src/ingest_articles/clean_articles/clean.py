"""Sanitization and validation of RSS entry fields."""

import html
import logging
import re
from typing import Any, Optional
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

_SCRIPT_BLOCK = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_JAVASCRIPT_SCHEME = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER = re.compile(r"on\w+\s*=", re.IGNORECASE)
_DATA_HTML = re.compile(r"data:\s*text/html", re.IGNORECASE)
_TAG = re.compile(r"<[^>]+>")
_IMG_SRC = re.compile(r'<img[^>]+src="([^">]+)"', re.IGNORECASE)

RSS_INDICATORS = ("rss", "feed", "xml", "atom")
RSS_EXTENSIONS = (".rss", ".xml", ".atom")
RSS_PATHS = ("/rss/", "/feed/", "/feeds/", "/news/", "/blog/")


def sanitize_text(text: Optional[str]) -> str:
    """Remove script blocks and inline script vectors from feed text."""
    if not text or not isinstance(text, str):
        return ""
    text = _SCRIPT_BLOCK.sub("", text)
    text = _JAVASCRIPT_SCHEME.sub("", text)
    text = _EVENT_HANDLER.sub("", text)
    text = _DATA_HTML.sub("", text)
    return text.strip()


def clean_text(text: Optional[str]) -> Optional[str]:
    """Clean text by stripping HTML, unescaping entities, and collapsing whitespace."""
    if not text:
        return None
    # Strip HTML tags (keep text content)
    text = _TAG.sub(" ", text)
    text = html.unescape(text)
    # Remove escaped quotes
    text = text.replace('\\"', '"')
    # Collapse whitespace
    text = re.sub(r"\s+", " ", text).strip()
    return text if text else None


def is_valid_url(url: Any) -> bool:
    """True for absolute http(s) URLs with a host."""
    if not url or not isinstance(url, str):
        return False
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def is_valid_rss_url(url: Any) -> bool:
    """True for http(s) URLs that look like a feed by host, path or extension."""
    if not is_valid_url(url):
        return False

    parsed = urlparse(url)
    path = parsed.path.lower()
    host = parsed.netloc.lower()

    has_indicator = any(token in path or token in host for token in RSS_INDICATORS)
    has_extension = path.endswith(RSS_EXTENSIONS)
    has_feed_path = any(segment in path for segment in RSS_PATHS)
    return has_indicator or has_extension or has_feed_path


def _first_url(items: Any, key: str = "url") -> Optional[str]:
    if isinstance(items, list):
        for item in items:
            if isinstance(item, dict) and item.get(key):
                return item[key]
    return None


def extract_image_url(entry: Any) -> Optional[str]:
    """
    Find an image for a feed entry.

    Order: enclosure, media:content, media:thumbnail, then the first
    <img src> inside the entry's content or summary.
    """
    if not entry:
        return None

    for enclosure in entry.get("enclosures") or []:
        href = enclosure.get("href") or enclosure.get("url")
        if href:
            return _JAVASCRIPT_SCHEME.sub("", href)

    image = _first_url(entry.get("media_content")) or _first_url(entry.get("media_thumbnail"))
    if image:
        return image

    content = entry.get("content")
    body = _first_url(content, "value") if isinstance(content, list) else content
    match = _IMG_SRC.search(body or entry.get("summary") or entry.get("description") or "")
    return match.group(1) if match else None
