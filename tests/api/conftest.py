"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session manager
    - db_manager patched so the readiness check sees the test engine
    - spy_store replaces the ContentStore to observe (or fail) store calls

Design Decisions:
    - Lifespan not run by ASGITransport, so no real engine is created
"""

import pytest
from httpx import ASGITransport, AsyncClient

import content_api.infrastructure.database as db_module
from content_api.api.dependencies import get_content_store
from content_api.infrastructure.database import DatabaseSessionManager, get_db
from content_api.main import app
from content_api.models.content import Content


@pytest.fixture
async def client(test_engine):
    """FastAPI test client with DB dependency overridden."""
    manager = DatabaseSessionManager(engine=test_engine)

    async def override_get_db():
        async with manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_content(test_db):
    """Insert one content row directly into the test DB."""
    content = Content(title="Seeded", body="seed body")
    test_db.add(content)
    await test_db.commit()
    await test_db.refresh(content)
    return content


class SpyStore:
    """ContentStore fake that records calls and optionally raises."""

    def __init__(self):
        self.calls: list[tuple] = []
        self.error: Exception | None = None

    def _record(self, *call):
        self.calls.append(call)
        if self.error is not None:
            raise self.error

    async def list_all(self):
        self._record("list_all")
        return []

    async def get(self, content_id):
        self._record("get", content_id)
        return None

    async def create(self, title, body):
        self._record("create", title, body)
        return Content(id=1, title=title, body=body)

    async def replace(self, content_id, title, body):
        self._record("replace", content_id, title, body)
        return Content(id=content_id, title=title, body=body)

    async def update_partial(self, content_id, fields):
        self._record("update_partial", content_id, fields)
        return Content(id=content_id, title=fields.get("title", "t"), body=None)

    async def delete(self, content_id):
        self._record("delete", content_id)


@pytest.fixture
async def spy_store(client):
    """Swap the real store for a SpyStore on top of the client fixture."""
    store = SpyStore()
    app.dependency_overrides[get_content_store] = lambda: store
    return store
