"""Tests for deduplicate_articles.helpers module."""

import argparse
import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from deduplicate_articles.helpers import (
    article_from_record,
    load_articles,
    load_articles_from_jsonl,
    parse_deduplicate_articles_args,
)
from ingest_articles.models import Category


class TestArticleFromRecord:
    def test_camel_case_record(self) -> None:
        record = {
            "title": "Storm hits coast",
            "description": "Heavy rain",
            "link": "https://bbc.co.uk/storm",
            "pubDate": "2024-01-01T12:00:00Z",
            "source": "BBC World",
            "category": "world",
            "imageUrl": "https://img/storm.jpg",
            "originalId": "abc",
        }
        article = article_from_record(record)

        assert article.pub_date == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert article.category is Category.WORLD
        assert article.image_url == "https://img/storm.jpg"
        assert article.original_id == "abc"

    def test_snake_case_record_with_defaults(self) -> None:
        record = {
            "title": "Storm hits coast",
            "description": "Heavy rain",
            "url": "https://bbc.co.uk/storm",
            "pub_date": "2024-01-01T12:00:00",
            "source": "BBC World",
        }
        article = article_from_record(record)

        assert article.link == "https://bbc.co.uk/storm"
        assert article.pub_date.tzinfo == timezone.utc
        assert article.category is Category.GENERAL
        assert article.image_url is None
        assert len(article.original_id) == 32

    def test_unknown_category_raises(self) -> None:
        with pytest.raises(ValueError):
            article_from_record({"title": "T", "link": "https://a.b/c", "pubDate": "2024-01-01", "category": "gossip"})


class TestLoadArticles:
    def test_skips_unparseable_records(self) -> None:
        records = [
            {"title": "Good", "link": "https://a.b/1", "pubDate": "2024-01-01T00:00:00Z"},
            {"title": "Bad date", "link": "https://a.b/2", "pubDate": "yesterday"},
        ]
        articles = load_articles(records)
        assert [a.title for a in articles] == ["Good"]

    def test_reads_jsonl(self, tmp_path: Path) -> None:
        path = tmp_path / "articles.jsonl"
        path.write_text(
            json.dumps({"title": "One", "link": "https://a.b/1", "pubDate": "2024-01-01T00:00:00Z"})
            + "\n\n"
            + json.dumps({"title": "Two", "link": "https://a.b/2", "pubDate": "2024-01-01T01:00:00Z"})
            + "\n"
        )
        assert [a.title for a in load_articles_from_jsonl(path)] == ["One", "Two"]


class TestParseArgs:
    def test_overrides(self) -> None:
        args = parse_deduplicate_articles_args(
            ["--input", "in.jsonl", "--similarity-threshold", "0.6", "--time-window-hours", "6", "--load-local"]
        )
        assert args.input == Path("in.jsonl")
        assert args.similarity_threshold == 0.6
        assert args.time_window_hours == 6.0
        assert args.load_local

    def test_defaults(self) -> None:
        args = parse_deduplicate_articles_args(["--input", "in.jsonl"])
        assert args.similarity_threshold is None
        assert args.config is None
        assert not args.load_local

    def test_rejects_threshold_above_one(self) -> None:
        with pytest.raises(SystemExit):
            parse_deduplicate_articles_args(["--input", "in.jsonl", "--similarity-threshold", "1.5"])
