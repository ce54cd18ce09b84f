"""CLI for one ingestion run: fetch feeds, group duplicates, save story groups."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from deduplicate_articles.config import load_dedup_config, set_config
from deduplicate_articles.group_articles import group_articles
from ingest_articles.config import load_ingest_config
from ingest_articles.helpers import parse_sources
from ingest_articles.ingest_articles import ingest_articles
from run_pipeline.helpers import parse_run_pipeline_args
from save_stories.config import load_storage_config
from save_stories.save_stories import save_stories
from save_stories.stores import LocalJsonlStore, S3Store

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    load_dotenv()
    args = parse_run_pipeline_args(argv)

    ingest_config = load_ingest_config(args.config)
    set_config(load_dedup_config(args.config))
    storage_config = load_storage_config(args.config)
    sources = parse_sources(args.sources)

    started = time.monotonic()
    logger.info("Step 1: Fetching from RSS feeds...")
    articles = ingest_articles(sources, ingest_config)
    if not articles:
        logger.warning("No articles fetched")
        return

    logger.info("Step 2: Deduplicating articles...")
    groups = group_articles(articles)
    logger.info("Deduplicated to %d story groups", len(groups))

    stores = []
    if args.load_local:
        stores.append(LocalJsonlStore(Path(storage_config.output_dir) / "story_groups.jsonl"))
    if args.load_s3:
        stores.append(S3Store(os.environ["S3_BUCKET_NAME"], storage_config.s3_prefix))

    saved = 0
    for store in stores:
        logger.info("Step 3: Saving to %s...", type(store).__name__)
        result = save_stories(groups, store, storage_config)
        saved = max(saved, result.saved)
        if not result.success:
            logger.error("Failed to save %d story groups: %s", result.failed, result.errors)

    logger.info(
        "Run completed in %.1fs: %d articles fetched, %d story groups, %d duplicates removed, %d saved",
        time.monotonic() - started,
        len(articles),
        len(groups),
        len(articles) - len(groups),
        saved,
    )


if __name__ == "__main__":
    main()
