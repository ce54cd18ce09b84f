"""S3 helpers."""

import json
import logging
from datetime import datetime
from typing import Any, Iterable, Mapping

import boto3
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def get_s3_client():
    return boto3.client("s3")


def build_s3_key(prefix: str, timestamp: datetime, filename: str) -> str:
    """Key under `prefix` partitioned by year/month/day of `timestamp`."""
    return f"{prefix}/year={timestamp:%Y}/month={timestamp:%m}/day={timestamp:%d}/{filename}"


def build_part_key(prefix: str, timestamp: datetime, part: str) -> str:
    """Partitioned key for the batch object named `part` on the day of `timestamp`."""
    filename = f"{prefix}_{part}.jsonl"
    return build_s3_key(prefix, timestamp, filename)


def upload_jsonl_to_s3(
    records: Iterable[Mapping[str, Any]],
    bucket: str,
    key: str,
    client=None,
) -> int:
    """Write records to s3://bucket/key as one JSONL object and return the record count."""
    lines = [json.dumps(record, default=str, ensure_ascii=False) for record in records]

    (client or get_s3_client()).put_object(
        Bucket=bucket,
        Key=key,
        Body=("\n".join(lines) + "\n").encode("utf-8"),
        ContentType="application/jsonl",
    )
    logger.debug("Wrote %d records to s3://%s/%s", len(lines), bucket, key)
    return len(lines)
