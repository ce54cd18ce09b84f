"""Data models for deduplicate_articles pipeline stage."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ingest_articles.models import Category


@dataclass(frozen=True)
class SourceLink:
    """Where one member of a story group was published."""
    source: str
    url: str


@dataclass(frozen=True)
class StoryGroup:
    """One real-world event as covered by one or more sources.

    Representative fields come from the anchor (newest) article, except
    `description` and `image_url` which the merge policy may replace.
    The parallel tuples hold one entry per member in discovery order.
    """
    title: str
    description: str
    image_url: Optional[str]
    pub_date: datetime
    category: Category
    source: str
    link: str
    original_id: str

    sources: tuple[str, ...]
    descriptions: tuple[str, ...]
    links: tuple[SourceLink, ...]
    categories: tuple[Category, ...]
    pub_dates: tuple[datetime, ...]

    source_diversity: int
    unique_categories: tuple[Category, ...]
    combined_description: str

    @property
    def is_singleton(self) -> bool:
        return self.source_diversity == 1
