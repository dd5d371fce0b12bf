"""Pytest configuration and fixtures for marketplace search.

Uses app.main:app for HTTP tests and a file-backed SQLite database (aiosqlite)
per test for repository and API tests. Environment is set before any app.*
import so get_settings() sees it.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DICTIONARY_REBUILD_LIMIT", "1000/minute")

from collections.abc import Awaitable, Callable  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.domain.enums import ProductStatus  # noqa: E402
from app.infrastructure.persistence.database import (  # noqa: E402
    Base,
    get_db,
    get_db_transactional,
)
from app.infrastructure.persistence.models import Product, ProductMedia  # noqa: E402
from app.infrastructure.security.jwt import create_access_token  # noqa: E402
from app.infrastructure.services import BackgroundActivityRecorder  # noqa: E402
from app.main import app  # noqa: E402

_product_counter = 0


@pytest.fixture
async def session_factory(tmp_path) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to a fresh SQLite database with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'search.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def db_session(session_factory) -> AsyncSession:
    """Database session for repository tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def recorder(session_factory) -> BackgroundActivityRecorder:
    """Activity recorder writing through the test database."""
    return BackgroundActivityRecorder(lambda: session_factory, max_recent=10)


@pytest.fixture
async def client(session_factory, recorder) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with DB dependencies overridden."""

    async def _get_db():
        async with session_factory() as session:
            yield session

    async def _get_db_transactional():
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    app.state.activity_recorder = recorder
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await recorder.drain()
    app.dependency_overrides.clear()
    del app.state.activity_recorder


def make_product(**overrides: Any) -> Product:
    """Build an active Product with neutral text fields; overrides win."""
    global _product_counter
    _product_counter += 1
    media = overrides.pop("media", [])
    fields: dict[str, Any] = {
        "name": f"Item {_product_counter}",
        "description": "Plain item",
        "brand": "Generic",
        "model": f"M{_product_counter}",
        "specifications": None,
        "tags": [],
        "status": ProductStatus.ACTIVE.value,
        "category_id": "cat-1",
        "zone_id": "zone-1",
        "seller_id": "seller-1",
        "regular_unit_price": 10.0,
        "pricing_tiers": [],
        "minimum_order_quantity": 1,
        "stock_quantity": 5,
        "unit": "piece",
    }
    fields.update(overrides)
    product = Product(**fields)
    product.media = [
        ProductMedia(url=url, purpose=purpose.value, priority=priority)
        for url, purpose, priority in media
    ]
    return product


@pytest.fixture
def seed_products(session_factory) -> Callable[..., Awaitable[list[Product]]]:
    """Insert products (built with make_product) and commit."""

    async def _seed(*products: Product) -> list[Product]:
        async with session_factory() as session:
            async with session.begin():
                session.add_all(products)
        return list(products)

    return _seed


def _bearer(user_id: str = "user-1", role: str = "customer") -> dict[str, str]:
    token = create_access_token({"sub": user_id, "role": role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def product_factory() -> Callable[..., Product]:
    """make_product: active Product with neutral fields; keyword overrides win.

    media is a list of (url, ProductMediaPurpose, priority).
    """
    return make_product


@pytest.fixture
def auth_header() -> Callable[..., dict[str, str]]:
    """Build an Authorization header for (user_id, role)."""
    return _bearer

