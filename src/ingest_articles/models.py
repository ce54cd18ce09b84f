"""Data models for ingest_articles pipeline stage."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Category(str, Enum):
    """Editorial category assigned to a feed."""
    POLITICS = "politics"
    WORLD = "world"
    BUSINESS = "business"
    TECH = "tech"
    SCIENCE = "science"
    HEALTH = "health"
    SPORTS = "sports"
    ENTERTAINMENT = "entertainment"
    GENERAL = "general"


@dataclass(frozen=True)
class FeedSource:
    """An RSS feed the pipeline reads from."""
    name: str
    url: str
    category: Category
    priority: str = "medium"


@dataclass(frozen=True)
class RawArticle:
    """Normalized article handed from the feed reader to deduplication."""
    title: str
    description: str
    link: str
    pub_date: datetime
    source: str
    category: Category
    image_url: Optional[str]
    original_id: str
