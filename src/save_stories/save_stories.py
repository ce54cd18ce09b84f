"""Persist story groups with content-hash ids, in batches with retries."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from common.hashing import generate_content_hash
from common.serialization import serialize_dataclass
from deduplicate_articles.models import StoryGroup
from save_stories.config import StorageConfig
from save_stories.stores import Document, StoryStore

logger = logging.getLogger(__name__)

ENGAGEMENT_FIELDS = ("likes", "shares", "views", "comment_count")


@dataclass
class SaveResult:
    saved: int = 0
    failed: int = 0
    errors: list[dict[str, Any]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.failed == 0


def build_story_document(group: StoryGroup, fetched_at: datetime) -> Document:
    """
    Return (document id, document) for a story group.

    The id is derived from title and publish date, so the same story
    fetched in a later run maps to the same document.
    """
    if not group.title or group.pub_date is None:
        raise ValueError("Invalid story group: missing title or pub_date")

    doc_id = generate_content_hash(group.title, group.pub_date)
    document = serialize_dataclass(group)
    document.update(
        fetched_at=fetched_at.isoformat(),
        processed=False,
        **{name: 0 for name in ENGAGEMENT_FIELDS},
    )
    return doc_id, document


def _chunks(items: list, size: int) -> list[list]:
    return [items[i:i + size] for i in range(0, len(items), size)]


def save_stories(
    groups: list[StoryGroup],
    store: StoryStore,
    config: StorageConfig | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> SaveResult:
    """
    Write story groups to `store` in batches of `config.batch_size`.

    A failing batch is retried up to `config.max_retries` times with
    exponential backoff; its groups count as failed if every attempt fails.
    """
    result = SaveResult()
    if not groups:
        return result

    config = config or StorageConfig()
    fetched_at = datetime.now(timezone.utc)

    documents: list[Document] = []
    for group in groups:
        try:
            documents.append(build_story_document(group, fetched_at))
        except (AttributeError, ValueError) as e:
            logger.error("Error preparing story group for batch: %s", e)
            result.errors.append({"story": getattr(group, "title", None), "error": str(e)})
            result.failed += 1

    batches = _chunks(documents, config.batch_size)
    for number, batch in enumerate(batches, start=1):
        for attempt in range(1, config.max_retries + 1):
            try:
                store.write_batch(batch)
            except Exception as e:
                logger.error("Batch %d attempt %d failed: %s", number, attempt, e)
                if attempt < config.max_retries:
                    sleep(2 ** attempt)
                    continue
                result.errors.append({"batch": number, "error": str(e), "stories_in_batch": len(batch)})
                result.failed += len(batch)
            else:
                result.saved += len(batch)
                logger.info("Committed batch %d/%d", number, len(batches))
                break

    logger.info("Save completed: %d saved, %d failed", result.saved, result.failed)
    return result
