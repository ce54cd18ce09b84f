"""Destinations for story documents."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

from common.aws import build_part_key, upload_jsonl_to_s3
from common.hashing import generate_hash

logger = logging.getLogger(__name__)

Document = tuple[str, dict[str, Any]]


class StoryStore(Protocol):
    """Writes one batch of (document id, document) pairs atomically."""

    def write_batch(self, documents: list[Document]) -> None: ...


class LocalJsonlStore:
    """
    JSONL file keyed by document id.

    Writing a document whose id is already present replaces the stored
    copy, so re-running the same batch is idempotent.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read_all(self) -> dict[str, dict[str, Any]]:
        if not self.path.exists():
            return {}
        documents = {}
        with self.path.open() as f:
            for line in f:
                line = line.strip()
                if line:
                    record = json.loads(line)
                    documents[record["id"]] = record
        return documents

    def write_batch(self, documents: list[Document]) -> None:
        stored = self.read_all()
        for doc_id, document in documents:
            stored[doc_id] = {**stored.get(doc_id, {}), **document, "id": doc_id}

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp_path.open("w") as f:
            for record in stored.values():
                f.write(json.dumps(record, default=str, ensure_ascii=False) + "\n")
        tmp_path.replace(self.path)


class S3Store:
    """
    Each batch becomes one JSONL object, partitioned by day.

    The object name is a hash of the batch's document ids, so a retried
    batch, or the same batch written again that day, overwrites its object.
    Objects are not merged per document: a story saved on two different
    days appears in both day partitions.
    """

    def __init__(self, bucket: str, prefix: str = "story_groups", client=None) -> None:
        self.bucket = bucket
        self.prefix = prefix
        self.client = client

    def write_batch(self, documents: list[Document]) -> None:
        batch_id = generate_hash(",".join(doc_id for doc_id, _ in documents), 16)
        key = build_part_key(self.prefix, datetime.now(timezone.utc), batch_id)
        count = upload_jsonl_to_s3(
            ({**document, "id": doc_id} for doc_id, document in documents),
            self.bucket,
            key,
            client=self.client,
        )
        logger.info("Uploaded %d story groups to s3://%s/%s", count, self.bucket, key)
