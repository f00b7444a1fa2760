"""Root conftest — shared test configuration and a fresh Storage per test."""

import os

import pytest

# Keep tests on the in-memory backend regardless of a developer's .env
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_FORMAT", "text")

from pmis.config import Settings  # noqa: E402
from pmis.infrastructure.storage import build_memory_storage  # noqa: E402


@pytest.fixture
def settings():
    return Settings(
        storage_backend="memory",
        import_processing_delay_seconds=0,
        log_format="text",
    )


@pytest.fixture
async def storage(settings):
    """In-memory storage seeded with the default admin (id 1)."""
    storage = build_memory_storage()
    await storage.seed_default_admin(settings)
    return storage
