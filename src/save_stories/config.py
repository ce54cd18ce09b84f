"""Configuration for saving story groups."""

from dataclasses import dataclass, fields

from common.config import load_section


@dataclass
class StorageConfig:
    batch_size: int = 499
    max_retries: int = 3
    output_dir: str = "output"
    s3_prefix: str = "story_groups"

    def __post_init__(self) -> None:
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {self.batch_size}")
        if self.max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {self.max_retries}")

    @classmethod
    def from_dict(cls, data: dict) -> "StorageConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown storage config keys: {', '.join(sorted(unknown))}")
        return cls(**data)


def load_storage_config(config_name: str | None = None) -> StorageConfig:
    """Load the `storage` section of configs/<name>.yaml."""
    return StorageConfig.from_dict(load_section("storage", config_name))
