import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["AUTH_SECRET"] = "test-secret-for-auraboard-session-tokens"

import httpx
import pytest
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from auraboard.auth import issue_session_token
from auraboard.main import app
from auraboard.database import Base, get_db, init_models

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def engine_test():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_models(engine)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine_test):
    return sessionmaker(engine_test, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def initialized_app(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def anon_client(initialized_app):
    transport = httpx.ASGITransport(app=initialized_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def _headers(email="alice@example.com", name="Alice"):
    return {"Authorization": f"Bearer {issue_session_token(email, name)}"}


@pytest.fixture
def auth_headers():
    return _headers


@pytest.fixture
async def client(anon_client):
    anon_client.headers.update(_headers())
    yield anon_client
