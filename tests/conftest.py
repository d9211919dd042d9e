"""Pytest configuration and fixtures for testing."""

import os

# Point the application at SQLite before any catalog module builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from datetime import datetime, timezone
from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import catalog.models  # noqa: F401
from catalog.client.api_client import ProductApiClient
from catalog.core.database import Base, get_db
from catalog.main import app
from catalog.schemas.product import ProductResponse


# In-memory database shared by every session of one test
@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory SQLite database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


# HTTP client mounted on the application
@pytest_asyncio.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """httpx client talking to the app, with get_db bound to the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def api(client: AsyncClient) -> ProductApiClient:
    """Product API client sharing the in-app HTTP client."""
    return ProductApiClient(client=client)


# Payload fixtures
@pytest.fixture
def laptop_payload() -> dict:
    return {"name": "Laptop", "price": 1299.99, "quantity": 5}


@pytest.fixture
def create_product(client: AsyncClient):
    """Factory that creates a product through the API and returns its data."""

    async def _create(**overrides) -> dict:
        payload = {"name": "Widget", "price": 10.0, "quantity": 1}
        payload.update(overrides)
        response = await client.post("/api/v1/products", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create


def build_product(product_id: int, name: str = "Widget", **overrides) -> ProductResponse:
    """Build a ProductResponse without touching the server."""
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    data = {
        "id": product_id,
        "name": name,
        "description": None,
        "price": Decimal("10.00"),
        "quantity": 1,
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    return ProductResponse(**data)


@pytest.fixture
def make_product():
    return build_product
