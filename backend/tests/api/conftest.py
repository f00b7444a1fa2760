"""API test fixtures — app built around a fresh Storage, httpx client over ASGI.

Invariants:
    - Every test gets its own Storage seeded with the default admin
    - The import processor runs with no delay so uploads settle within the request

Design Decisions:
    - Storage injected through create_app(): the lifespan is never entered,
      so nothing touches the configured backend
    - Background tasks finish before httpx returns the response (ASGI transport),
      so tests can assert the processed state right after POST
"""

import pytest
from httpx import ASGITransport, AsyncClient

from pmis.main import create_app
from pmis.services.import_processor import ImportProcessor


@pytest.fixture
def processor(storage):
    return ImportProcessor(storage.imported_files, delay_seconds=0)


@pytest.fixture
def app(settings, storage, processor):
    return create_app(settings=settings, storage=storage, import_processor=processor)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
