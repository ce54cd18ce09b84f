import pytest

from deduplicate_articles.config import reset_config


@pytest.fixture(autouse=True)
def reset_dedup_config():
    """Drop any dedup config a CLI or test installed, so each test loads its own."""
    reset_config()
    yield
    reset_config()
