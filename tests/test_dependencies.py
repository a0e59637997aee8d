"""
Pets API — Request Wiring Tests
=================================

What:  The production get_pet_repository / session_scope path, with no
       dependency overrides.
How:   Creates the `pets` table on pets_api.database.engine (the temp-file
       SQLite URL set in conftest.py) and talks to the app over HTTPX.
       Every assertion about persistence reads back through a fresh session,
       so only committed writes are visible.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pets_api import dependencies
from pets_api.config import settings
from pets_api.database import Base, async_session_factory, engine
from pets_api.models.pet import Pet
from pets_api.repositories.memory_repository import InMemoryPetRepository

REX = {"name": "Rex", "type": "dog", "ownerEmail": "wired@example.com"}


@pytest_asyncio.fixture
async def wired_client():
    from pets_api.main import app

    app.dependency_overrides.clear()
    await engine.dispose()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # Pooled connections belong to this test's event loop
    await engine.dispose()


async def _stored_count() -> int:
    async with async_session_factory() as session:
        return (await session.execute(select(func.count()).select_from(Pet))).scalar_one()


@pytest.mark.asyncio
async def test_create_is_committed_before_201(wired_client):
    response = await wired_client.post("/api/pets", json=REX)

    assert response.status_code == 201
    pet_id = response.json()["id"]

    async with async_session_factory() as session:
        row = (await session.execute(select(Pet).where(Pet.id == pet_id))).scalar_one()
    assert row.name == "Rex"

    fetched = await wired_client.get(f"/api/pets/{pet_id}")
    assert fetched.status_code == 200
    assert fetched.json() == response.json()


@pytest.mark.asyncio
async def test_delete_is_committed_before_204(wired_client):
    pet_id = (await wired_client.post("/api/pets", json=REX)).json()["id"]

    response = await wired_client.delete(f"/api/pets/{pet_id}")

    assert response.status_code == 204
    assert await _stored_count() == 0


@pytest.mark.asyncio
async def test_failed_commit_is_not_reported_as_created(wired_client, monkeypatch):
    async def failing_commit(self):
        raise SQLAlchemyError("disk I/O error")

    monkeypatch.setattr(AsyncSession, "commit", failing_commit)

    response = await wired_client.post("/api/pets", json=REX)

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "server_error"
    assert "disk I/O error" not in body["message"]

    monkeypatch.undo()
    assert await _stored_count() == 0
    assert (await wired_client.get("/api/pets/1")).status_code == 404


@pytest.mark.asyncio
async def test_rejected_create_leaves_table_empty(wired_client):
    response = await wired_client.post("/api/pets", json={"name": "Rex", "type": "dog"})

    assert response.status_code == 400
    assert await _stored_count() == 0


@pytest.mark.asyncio
async def test_memory_backend_is_selected_from_settings(wired_client, monkeypatch):
    store = InMemoryPetRepository()
    monkeypatch.setattr(settings, "storage_backend", "memory")
    monkeypatch.setattr(dependencies, "memory_pet_repository", store)

    created = await wired_client.post("/api/pets", json=REX)
    listed = await wired_client.get("/api/pets", params={"ownerEmail": REX["ownerEmail"]})

    assert created.status_code == 201
    assert listed.json() == [created.json()]
    assert len(store) == 1
    assert await _stored_count() == 0
