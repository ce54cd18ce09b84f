"""Local file I/O utilities."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

logger = logging.getLogger(__name__)


def build_output_filename(prefix: str, timestamp: datetime | None = None) -> str:
    """Build a timestamped JSONL filename for a pipeline output."""
    timestamp = timestamp or datetime.now(timezone.utc)
    return f"{prefix}_{timestamp.strftime('%Y_%m_%d_%H_%M')}.jsonl"


def save_jsonl_local(
    records: list[dict[str, Any]],
    prefix: str,
    output_dir: str = "output",
    timestamp: datetime | None = None,
) -> Path:
    """Save records to a local JSONL file.

    Args:
        records: List of dictionaries to save.
        prefix: Filename prefix (e.g., "story_groups").
        output_dir: Directory to save to (default: "output").
        timestamp: Timestamp to include in filename (default: now, UTC).

    Returns:
        Path to the created file.
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    filepath = output_path / build_output_filename(prefix, timestamp)

    with filepath.open("w") as f:
        for record in records:
            f.write(json.dumps(record, default=str, ensure_ascii=False) + "\n")

    logger.info("Saved %d records to %s", len(records), filepath)
    return filepath


def read_jsonl_local(path: str | Path) -> Iterator[dict[str, Any]]:
    """Read a local JSONL file, skipping blank lines."""
    with Path(path).open() as f:
        for line in f:
            line = line.strip()
            if line:
                yield json.loads(line)
