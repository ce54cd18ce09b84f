"""Tests for deduplicate_articles.prefilter module."""

from datetime import datetime, timezone

from deduplicate_articles.prefilter import filter_exact_and_near_duplicate_titles
from ingest_articles.models import Category, RawArticle


def _article(title: str, source: str = "BBC World") -> RawArticle:
    return RawArticle(
        title=title,
        description=f"{title} description",
        link=f"https://example.com/{source.replace(' ', '-')}/{abs(hash(title))}",
        pub_date=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
        source=source,
        category=Category.WORLD,
        image_url=None,
        original_id=title,
    )


class TestFilterExactAndNearDuplicateTitles:
    def test_collapses_identical_titles_keeping_first(self) -> None:
        first = _article("Storm hits coast", "BBC World")
        second = _article("Storm hits coast", "The Guardian World")
        assert filter_exact_and_near_duplicate_titles([first, second]) == [first]

    def test_identical_ignoring_case_and_padding(self) -> None:
        first = _article("Storm hits coast")
        second = _article("  STORM HITS COAST ")
        assert filter_exact_and_near_duplicate_titles([first, second]) == [first]

    def test_drops_cosmetic_republish(self) -> None:
        first = _article("Prime minister announces snap general election for next month")
        second = _article("Prime minister announces snap general election for next month.")
        assert filter_exact_and_near_duplicate_titles([first, second]) == [first]

    def test_keeps_distinct_stories(self) -> None:
        articles = [
            _article("Storm hits coast"),
            _article("Storm hits coast today"),
            _article("Local bakery wins award"),
        ]
        assert filter_exact_and_near_duplicate_titles(articles) == articles

    def test_preserves_order(self) -> None:
        articles = [_article("Zebra escapes zoo"), _article("Apple unveils phone"), _article("Markets rally")]
        result = filter_exact_and_near_duplicate_titles(articles)
        assert [a.title for a in result] == ["Zebra escapes zoo", "Apple unveils phone", "Markets rally"]

    def test_custom_threshold(self) -> None:
        first = _article("Storm hits coast")
        second = _article("Storm hits coast today")
        assert filter_exact_and_near_duplicate_titles([first, second], threshold=0.8) == [first]

    def test_empty_input(self) -> None:
        assert filter_exact_and_near_duplicate_titles([]) == []
