"""Field-level rules for building a story group from its member articles."""

from __future__ import annotations

from datetime import datetime

from deduplicate_articles.models import SourceLink, StoryGroup
from ingest_articles.models import Category, RawArticle


class StoryGroupBuilder:
    """Accumulates the members of one story group.

    A builder is seeded from the anchor article and lives only for the
    duration of that group's scan; `build` returns an immutable StoryGroup.
    """

    def __init__(self, anchor: RawArticle) -> None:
        self.anchor = anchor
        self.description = anchor.description
        self.image_url = anchor.image_url
        self.sources: list[str] = []
        self.descriptions: list[str] = []
        self.links: list[SourceLink] = []
        self.categories: list[Category] = []
        self.pub_dates: list[datetime] = []
        self.add_member(anchor)

    def add_member(self, article: RawArticle) -> None:
        self.sources.append(article.source)
        self.descriptions.append(article.description)
        self.links.append(SourceLink(source=article.source, url=article.link))
        self.categories.append(article.category)
        self.pub_dates.append(article.pub_date)

    def __len__(self) -> int:
        return len(self.sources)

    def build(self) -> StoryGroup:
        anchor = self.anchor
        return StoryGroup(
            title=anchor.title,
            description=self.description,
            image_url=self.image_url,
            pub_date=anchor.pub_date,
            category=anchor.category,
            source=anchor.source,
            link=anchor.link,
            original_id=anchor.original_id,
            sources=tuple(self.sources),
            descriptions=tuple(self.descriptions),
            links=tuple(self.links),
            categories=tuple(self.categories),
            pub_dates=tuple(self.pub_dates),
            source_diversity=len(self.sources),
            unique_categories=tuple(dict.fromkeys(self.categories)),
            combined_description=" ".join(self.descriptions),
        )


def merge_into(group: StoryGroupBuilder, candidate: RawArticle) -> StoryGroupBuilder:
    """Add `candidate` to `group`.

    The longest description becomes representative. The first available
    image is adopted and never replaced afterwards.
    """
    group.add_member(candidate)

    if candidate.description and len(candidate.description) > len(group.description or ""):
        group.description = candidate.description

    if not group.image_url and candidate.image_url:
        group.image_url = candidate.image_url

    return group


def singleton_group(article: RawArticle) -> StoryGroup:
    """A group holding a single article."""
    return StoryGroupBuilder(article).build()
