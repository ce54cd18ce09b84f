"""Configuration for story deduplication."""

from dataclasses import dataclass, fields
from datetime import timedelta

from common.config import ConfigSingleton, load_section


@dataclass
class DedupConfig:
    """Tunable parameters of the grouping engine."""

    similarity_threshold: float = 0.5
    time_window_hours: float = 12
    keyword_limit: int = 3
    near_duplicate_threshold: float = 0.98

    def __post_init__(self) -> None:
        for name in ("similarity_threshold", "near_duplicate_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")

        if self.time_window_hours <= 0:
            raise ValueError(f"time_window_hours must be positive, got {self.time_window_hours}")

        if self.keyword_limit < 1:
            raise ValueError(f"keyword_limit must be at least 1, got {self.keyword_limit}")

    @property
    def time_window(self) -> timedelta:
        return timedelta(hours=self.time_window_hours)

    @classmethod
    def from_dict(cls, data: dict) -> "DedupConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown dedup config keys: {', '.join(sorted(unknown))}")
        return cls(**data)


def load_dedup_config(config_name: str | None = None) -> DedupConfig:
    """Load the `dedup` section of configs/<name>.yaml."""
    return DedupConfig.from_dict(load_section("dedup", config_name))


_manager = ConfigSingleton(load_dedup_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
