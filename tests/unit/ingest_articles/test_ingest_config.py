"""Tests for ingest_articles.config module."""

import pytest

from ingest_articles.config import IngestConfig, load_ingest_config


class TestIngestConfig:
    def test_defaults(self) -> None:
        config = IngestConfig()
        assert config.fetch_batch_size == 5
        assert config.failure_threshold == 3
        assert config.breaker_timeout_seconds == 3600

    def test_rejects_zero_batch_size(self) -> None:
        with pytest.raises(ValueError, match="fetch_batch_size"):
            IngestConfig(fetch_batch_size=0)

    def test_rejects_negative_delay(self) -> None:
        with pytest.raises(ValueError, match="batch_delay_seconds"):
            IngestConfig(batch_delay_seconds=-1)

    def test_from_dict_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValueError, match="Unknown ingest config keys"):
            IngestConfig.from_dict({"fetch_batch_size": 2, "retries": 5})


class TestLoadIngestConfig:
    def test_loads_prod(self) -> None:
        config = load_ingest_config("prod")
        assert config == IngestConfig()

    def test_loads_dev_with_defaults_for_missing_keys(self) -> None:
        config = load_ingest_config("dev")
        assert config.fetch_batch_size == 2
        assert config.failure_threshold == 3

    def test_missing_config_file(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_ingest_config("does-not-exist")
