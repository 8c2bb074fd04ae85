"""Shared fixtures for chunking tests."""

from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from app.config.chunking.models import ChunkingConfig

THREE_SENTENCES = "First sentence here. Second sentence follows. Third sentence ends it."
THREE_PARAGRAPHS = "First paragraph here.\n\nSecond paragraph follows.\n\nThird paragraph ends it."
UTF8_MIXED = "Hello 世界 🌍 This is a test with UTF-8 characters. 日本語も大丈夫です。"


@pytest.fixture()
def make_config() -> Callable[..., ChunkingConfig]:
    """Build a ChunkingConfig with test-friendly defaults (chunk_size=100, overlap=20)."""

    def _make(strategy: str = "sentence", chunk_size: int = 100, overlap: int = 20) -> ChunkingConfig:
        return ChunkingConfig(strategy=strategy, chunk_size=chunk_size, overlap=overlap)

    return _make


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    """Test client with the app lifespan running."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client
