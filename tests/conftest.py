from __future__ import annotations

import asyncio
import os
from datetime import datetime, timedelta, timezone

# Settings are read at import time, so configure before importing tenderhub.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./tenderhub-test.db")
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from tenderhub.db.database import get_db
from tenderhub.main import create_app
from tenderhub.models.registry import Base
from tenderhub.services.storage import get_storage


class FakeStorage:
    def __init__(self):
        self.objects = {}

    def public_url(self, key: str) -> str:
        return f"https://files.test/uploads/{key}"

    async def upload(self, key: str, content: bytes, content_type: str) -> str:
        self.objects[key] = (content, content_type)
        return self.public_url(key)

    async def delete(self, key: str) -> None:
        self.objects.pop(key, None)


@pytest.fixture
def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)

    async def _create():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(_create())
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def client(engine, storage):
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async def _get_db():
        async with session_factory() as session:
            yield session

    app = create_app()
    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_storage] = lambda: storage
    with TestClient(app) as c:
        yield c


def run_sql(engine, statement):
    """Runs a statement outside the API, e.g. to age a tender past its deadline."""

    async def _run():
        async with engine.begin() as conn:
            await conn.execute(statement)

    asyncio.run(_run())


def future(days: int = 7) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register(client, email: str, company: str = "Acme Supplies", industry: str = "Construction") -> dict:
    r = client.post(
        "/v1/auth/register",
        json={"email": email, "password": "s3cret-pass", "companyName": company, "industry": industry},
    )
    assert r.status_code == 201, r.text
    return r.json()["data"]


def create_tender(client, token: str, **overrides) -> dict:
    payload = {
        "title": "Office renovation works",
        "description": "Full renovation of a two-storey office building downtown.",
        "budget_min": 10000,
        "budget_max": 25000,
        "deadline": future(),
        "status": "published",
    }
    payload.update(overrides)
    r = client.post("/v1/tenders/", json=payload, headers=auth(token))
    assert r.status_code == 201, r.text
    return r.json()["data"]["tender"]


PROPOSAL = (
    "We will deliver the full scope within six weeks using our certified crew "
    "and provide a two-year warranty on all works."
)
