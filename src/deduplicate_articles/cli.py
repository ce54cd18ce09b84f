"""CLI for grouping a dump of raw articles into story groups."""

from __future__ import annotations

import dataclasses
import logging

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from common.local_io import save_jsonl_local
from common.serialization import serialize_dataclass
from deduplicate_articles.config import load_dedup_config, set_config
from deduplicate_articles.group_articles import group_articles
from deduplicate_articles.helpers import (
    load_articles_from_jsonl,
    parse_deduplicate_articles_args,
)

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    load_dotenv()
    args = parse_deduplicate_articles_args(argv)

    config = load_dedup_config(args.config)
    overrides = {}
    if args.similarity_threshold is not None:
        overrides["similarity_threshold"] = args.similarity_threshold
    if args.time_window_hours is not None:
        overrides["time_window_hours"] = args.time_window_hours
    if overrides:
        config = dataclasses.replace(config, **overrides)
    set_config(config)

    articles = load_articles_from_jsonl(args.input)
    if not articles:
        logger.warning("No articles to deduplicate")
        return

    groups = group_articles(articles)
    merged = sum(1 for group in groups if not group.is_singleton)
    logger.info(
        "%d articles -> %d story groups (%d with multiple sources)",
        len(articles),
        len(groups),
        merged,
    )

    if args.load_local:
        records = [serialize_dataclass(group) for group in groups]
        save_jsonl_local(records, "story_groups", args.output_dir)


if __name__ == "__main__":
    main()
