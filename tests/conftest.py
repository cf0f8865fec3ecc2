"""Shared fixtures: a fresh SQLite database per test and an ASGI client bound to it"""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import Base, get_db
from app.main import app
from app import models  # noqa: F401


@pytest.fixture
def mint_payload():
    return {
        "name": "Downtown Office Tower",
        "symbol": "DOT",
        "institutionName": "Acme Realty Trust",
        "institutionAddress": "100 Main St",
        "description": "Class A office building",
        "totalSupply": "1000",
        "expectedYield": "8.5",
    }


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def broken_session_factory(tmp_path):
    # The parent directory does not exist, so every connection attempt fails
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'test.db'}")
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


def _override_db(factory):
    async def override_get_db():
        async with factory() as session:
            yield session

    return override_get_db


@pytest_asyncio.fixture
async def client(session_factory):
    app.dependency_overrides[get_db] = _override_db(session_factory)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def broken_client(broken_session_factory):
    app.dependency_overrides[get_db] = _override_db(broken_session_factory)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
