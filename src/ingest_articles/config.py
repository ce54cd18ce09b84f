"""Configuration for RSS ingestion."""

from dataclasses import dataclass, fields

from common.config import load_section


@dataclass
class IngestConfig:
    fetch_batch_size: int = 5
    batch_delay_seconds: float = 1.0
    max_processing_seconds: float = 540
    request_timeout_seconds: float = 30
    failure_threshold: int = 3
    breaker_timeout_seconds: float = 3600
    breaker_state_path: str = "state/circuit_breaker.json"

    def __post_init__(self) -> None:
        if self.fetch_batch_size < 1:
            raise ValueError(f"fetch_batch_size must be at least 1, got {self.fetch_batch_size}")
        if self.failure_threshold < 1:
            raise ValueError(f"failure_threshold must be at least 1, got {self.failure_threshold}")
        for name in ("batch_delay_seconds", "max_processing_seconds", "request_timeout_seconds",
                     "breaker_timeout_seconds"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    @classmethod
    def from_dict(cls, data: dict) -> "IngestConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown ingest config keys: {', '.join(sorted(unknown))}")
        return cls(**data)


def load_ingest_config(config_name: str | None = None) -> IngestConfig:
    """Load the `ingest` section of configs/<name>.yaml."""
    return IngestConfig.from_dict(load_section("ingest", config_name))
