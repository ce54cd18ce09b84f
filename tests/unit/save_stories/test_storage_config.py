"""Tests for save_stories.config module."""

import pytest

from save_stories.config import StorageConfig, load_storage_config


class TestStorageConfig:
    def test_defaults(self) -> None:
        config = StorageConfig()
        assert config.batch_size == 499
        assert config.max_retries == 3

    def test_rejects_zero_batch_size(self) -> None:
        with pytest.raises(ValueError, match="batch_size"):
            StorageConfig(batch_size=0)

    def test_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValueError, match="Unknown storage config keys"):
            StorageConfig.from_dict({"bucket": "x"})

    def test_loads_dev(self) -> None:
        config = load_storage_config("dev")
        assert config.batch_size == 50
        assert config.output_dir == "output/dev"
