"""Hashing utilities."""

import hashlib
from datetime import datetime


def generate_hash(value: str, length: int = 32) -> str:
    """Return a truncated sha256 hex digest of a non-empty string."""
    if not value or not isinstance(value, str):
        raise ValueError("Invalid input for hash generation")
    return hashlib.sha256(value.encode("utf-8")).hexdigest()[:length]


def generate_content_hash(title: str, pub_date: datetime) -> str:
    """Generate the idempotent storage key for a story from title and publish date."""
    return generate_hash(f"{title}{pub_date.isoformat()}")
